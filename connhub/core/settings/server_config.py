"""HTTP server configuration for ``python -m connhub``."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Where uvicorn binds and whether it watches for code changes."""

    host: str
    port: int
    reload: bool = False
