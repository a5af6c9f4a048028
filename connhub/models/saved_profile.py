"""Saved connection database model."""

import re
from typing import Any, ClassVar

import structlog
from sqlalchemy import Boolean, String
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Mapped, mapped_column

from connhub.core.security import SecretCipher
from connhub.models.connection_profile import ConnectionProfile
from connhub.models.derivation import update_profile
from connhub.models.secret import Secret, SecretType, reveal_optional, seal_optional

logger = structlog.get_logger()

SECRET_FIELDS: tuple[str, ...] = ("password", "ssh_keyfile_password", "ssh_password")
REDSHIFT_DOMAIN = "redshift.amazonaws.com"
MIN_PORT = 1
MAX_PORT = 65535

_URL_PASSWORD = re.compile(r"^((?:[\w+]+://)?[^:/@]*:)[^@]*@")
_SCHEME = re.compile(r"^[\w+]+://")
_WHITESPACE = re.compile(r"\s")
_NO_SCHEME = "noscheme"


class SavedProfile(ConnectionProfile):
    """A named connection the user keeps, with encrypted secrets."""

    __tablename__ = "saved_connection"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    label_color: Mapped[str | None] = mapped_column(
        String(32), nullable=True, default="default"
    )
    remember_password: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    password: Mapped[Secret | None] = mapped_column(SecretType(), nullable=True)
    ssh_keyfile_password: Mapped[Secret | None] = mapped_column(
        SecretType(), nullable=True
    )
    ssh_password: Mapped[Secret | None] = mapped_column(SecretType(), nullable=True)

    _field_defaults: ClassVar[dict[str, Any]] = {
        **ConnectionProfile._field_defaults,
        "label_color": "default",
        "remember_password": True,
    }

    def set_secret(self, field: str, plaintext: str | None, cipher: SecretCipher) -> None:
        """Seal ``plaintext`` into one of the secret fields."""
        if field not in SECRET_FIELDS:
            raise ValueError(f"'{field}' is not a secret field")
        setattr(self, field, seal_optional(plaintext, cipher))

    def reveal_secret(self, field: str, cipher: SecretCipher) -> str | None:
        """Decrypt one of the secret fields."""
        if field not in SECRET_FIELDS:
            raise ValueError(f"'{field}' is not a secret field")
        return reveal_optional(getattr(self, field), cipher)

    def parse(self, url: str, cipher: SecretCipher) -> bool:
        """Fill connection fields from a URL such as ``postgres://u:p@host/db``.

        The scheme is optional; without one the connection type is kept.
        Parts missing from the URL keep their current values. Returns False
        and leaves the profile untouched when the URL cannot be parsed.
        """
        try:
            if not url.strip() or _WHITESPACE.search(url):
                raise ArgumentError("Connection string is empty or contains whitespace")
            has_scheme = _SCHEME.match(url) is not None
            parsed = make_url(url if has_scheme else f"{_NO_SCHEME}://{url}")
            backend = parsed.get_backend_name() if has_scheme else None
            host = parsed.host
            port = parsed.port
            if port is not None and not MIN_PORT <= port <= MAX_PORT:
                raise ValueError(f"Port {port} is out of range")
        except (ArgumentError, ValueError) as exc:
            logger.error(
                "Unable to parse connection string",
                url=_redact(url),
                error=str(exc),
            )
            return False

        connection_type = backend or self.connection_type
        if host and REDSHIFT_DOMAIN in host:
            connection_type = "redshift"
        # without a scheme the current type and its port stay as they are
        if has_scheme or connection_type != self.connection_type:
            update_profile(self, "connection_type", connection_type)

        self.host = host or self.host
        self.port = port or self.port
        self.username = parsed.username or self.username
        if parsed.password:
            self.password = Secret.seal(str(parsed.password), cipher)
        self.default_database = self._database_from(parsed.database) or self.default_database
        return True

    def _database_from(self, path: str | None) -> str | None:
        if not path:
            return None
        # SQLite URLs carry a file path, everything else a database name
        if self.connection_type == "sqlite":
            return path
        return path.split("/")[0] or None

    def __repr__(self) -> str:
        return f"<SavedProfile {self.name} ({self.connection_type})>"


def _redact(url: str) -> str:
    return _URL_PASSWORD.sub(r"\1***@", url)
