"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from connhub.core.settings import (
    AppConfig,
    DatabaseConfig,
    EncryptionConfig,
    ServerConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.encryption.key_file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="connhub",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )

    # Server
    host: str = Field(
        default="127.0.0.1",
        description="Server host",
    )
    port: int = Field(
        default=8004,
        ge=1,
        le=65535,
        description="Server port",
    )

    # Database
    database_url: SecretStr = Field(
        default=SecretStr("sqlite+aiosqlite:///./connhub.db"),
        description="Async database URL for saved connections",
    )

    # Encryption
    encryption_key: SecretStr | None = Field(
        default=None,
        description="URL-safe base64 encoded 32 byte key for secret columns",
    )
    encryption_key_file: Path = Field(
        default=Path("~/.config/connhub/.key"),
        description="File holding the encryption key when none is set inline",
    )

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
            reload=self.app.is_development,
        )

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(url=self.database_url)

    @cached_property
    def encryption(self) -> EncryptionConfig:
        """Encryption key configuration."""
        return EncryptionConfig(
            key=self.encryption_key,
            key_file=self.encryption_key_file,
        )


# Global settings instance
settings = Settings()
