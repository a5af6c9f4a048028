"""Domain-specific configuration models."""

from connhub.core.settings.app_config import AppConfig
from connhub.core.settings.database_config import DatabaseConfig
from connhub.core.settings.encryption_config import EncryptionConfig
from connhub.core.settings.server_config import ServerConfig

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "EncryptionConfig",
    "ServerConfig",
]
