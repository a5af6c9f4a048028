"""Storage database configuration."""

from pydantic import BaseModel, SecretStr


class DatabaseConfig(BaseModel, frozen=True):
    """Settings for the database that stores saved connections."""

    url: SecretStr

    @property
    def async_url(self) -> str:
        """DB URL as handed to the async engine."""
        return self.url.get_secret_value()

    @property
    def is_sqlite(self) -> bool:
        """Check if the storage database is SQLite."""
        return self.async_url.startswith("sqlite")
