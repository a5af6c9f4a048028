"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from connhub.api.v1.saved_profile_router import router as saved_profile_router
from connhub.core.config import settings
from connhub.core.database import Base, engine
from connhub.core.exceptions import (
    AppException,
    app_exception_handler,
    validation_exception_handler,
)
from connhub.dependencies import get_cipher
from connhub.schemas.response_schema import ApiResponse, success_response

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
    )
    # load the encryption key now so a bad key stops startup
    get_cipher()
    if settings.app.is_development:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app.name,
    description="Saved database connections with encrypted credentials",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.app.debug,
)

# Exception handlers
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]


@app.get("/health", response_model=ApiResponse[dict])
async def health_check() -> dict:
    """Health check endpoint."""
    return success_response({"status": "healthy"})


app.include_router(saved_profile_router)
