"""Connection profile base model."""

import hashlib
import os
from datetime import datetime
from typing import Any, ClassVar

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from connhub.core.database import Base
from connhub.models.connection_types import normalize_connection_type
from connhub.models.derivation import DEFAULT_SSH_MODE, update_profile

DEPRECATED_UNIQUE_HASH = "DEPRECATED"
UNKNOWN_SQLITE_PATH = "./unknown.db"


class ConnectionProfile(Base):
    """Where a database lives and how to reach it, optionally over SSH.

    Writes to ``connection_type`` and ``ssh_mode`` should go through
    :func:`connhub.models.derivation.update_profile` so dependent fields
    stay consistent. The constructor already does this for its keyword
    arguments.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    connection_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    host: Mapped[str | None] = mapped_column(String(255), nullable=True)
    port: Mapped[int | None] = mapped_column(Integer, nullable=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    domain: Mapped[str | None] = mapped_column(String(255), nullable=True)
    default_database: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    uri: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    # kept for rows written by older releases; never recomputed
    unique_hash: Mapped[str] = mapped_column(
        String(500), nullable=False, default=DEPRECATED_UNIQUE_HASH
    )

    ssh_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ssh_host: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ssh_port: Mapped[int | None] = mapped_column(Integer, nullable=True, default=22)
    ssh_mode: Mapped[str] = mapped_column(
        String(8), nullable=False, default=DEFAULT_SSH_MODE
    )
    ssh_keyfile: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    ssh_username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ssh_bastion_host: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ssl: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    _field_defaults: ClassVar[dict[str, Any]] = {
        "host": "localhost",
        "unique_hash": DEPRECATED_UNIQUE_HASH,
        "ssh_enabled": False,
        "ssh_port": 22,
        "ssh_mode": DEFAULT_SSH_MODE,
        "ssh_keyfile": None,
        "ssl": False,
    }
    _derived_fields: ClassVar[tuple[str, ...]] = ("connection_type", "ssh_mode")

    def __init__(self, **kwargs: Any) -> None:
        derived = {
            field: kwargs.pop(field)
            for field in self._derived_fields
            if field in kwargs
        }
        for field, default in self._field_defaults.items():
            kwargs.setdefault(field, default)
        super().__init__(**kwargs)
        for field, value in derived.items():
            update_profile(self, field, value)

    @validates("connection_type")
    def _normalize_connection_type(self, key: str, value: str | None) -> str | None:
        # direct writes are normalized too; only the port reset needs update_profile
        return normalize_connection_type(value)

    # --- Computed views ---

    @property
    def hash(self) -> str:
        """MD5 fingerprint of the network location, for de-duplication.

        The third slot is reserved for a file path and is always empty.
        """
        parts = [
            self.host,
            self.port,
            None,
            self.uri,
            self.ssh_host,
            self.ssh_port,
            self.default_database,
            self.ssh_bastion_host,
        ]
        fingerprint = "".join(str(part or "") for part in parts)
        return hashlib.md5(fingerprint.encode("utf-8")).hexdigest()

    @property
    def simple_connection_string(self) -> str:
        if self.connection_type == "sqlite":
            return os.path.basename(self.default_database or UNKNOWN_SQLITE_PATH)
        return f"{_text(self.host)}:{_text(self.port)}/{_text(self.default_database)}"

    @property
    def full_connection_string(self) -> str:
        if self.connection_type == "sqlite":
            return self.default_database or UNKNOWN_SQLITE_PATH
        result = (
            f"{self.username or 'user'}@{_text(self.host)}:{_text(self.port)}"
            f"/{_text(self.default_database)}"
        )
        if self.ssh_host:
            result += f" via {_text(self.ssh_username)}@{self.ssh_host}"
            if self.ssh_bastion_host:
                result += f" jump({self.ssh_bastion_host})"
        return result


def _text(value: object) -> str:
    return "" if value is None else str(value)
