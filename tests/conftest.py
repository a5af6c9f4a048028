"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from connhub.core.database import Base  # noqa: E402
from connhub.core.security import SecretCipher  # noqa: E402
from connhub.models import SavedProfile  # noqa: E402, F401

TEST_KEY = bytes(range(32))
OTHER_KEY = bytes(range(32, 64))

# --- Test DB (SQLite in-memory) ---

test_engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    """Create all tables before each test, drop after."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a test database session."""
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# --- Encryption ---


@pytest.fixture
def cipher() -> SecretCipher:
    """Cipher with a fixed test key."""
    return SecretCipher(TEST_KEY)


@pytest.fixture
def other_cipher() -> SecretCipher:
    """Cipher with a different key than ``cipher``."""
    return SecretCipher(OTHER_KEY)


# --- App override & client fixtures ---


def _get_app():  # type: ignore[no-untyped-def]
    """Import app lazily and apply overrides."""
    from connhub.core.database import get_async_session as original_dep
    from connhub.dependencies import get_cipher
    from connhub.main import app

    app.dependency_overrides[original_dep] = override_get_async_session
    app.dependency_overrides[get_cipher] = lambda: SecretCipher(TEST_KEY)
    return app


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    application = _get_app()
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# --- DB session for tests ---


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async session for repository tests."""
    async with test_session_factory() as session:
        yield session
