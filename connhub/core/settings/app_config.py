"""Runtime environment of the connhub API."""

from typing import Literal

from pydantic import BaseModel


class AppConfig(BaseModel, frozen=True):
    """Name and environment the API runs under.

    Development creates the ``saved_connection`` table at startup and
    reloads the server on code changes.
    """

    name: str
    env: Literal["development", "staging", "production"]
    debug: bool

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def echo_sql(self) -> bool:
        """Log emitted SQL, only in development with debug on."""
        return self.is_development and self.debug
