"""Saved connection API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from connhub.models import SavedProfile
from connhub.models.derivation import SSH_MODES


class ConnectionTypeResponse(BaseModel):
    """Supported connection type."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    name: str
    value: str


class SavedProfileFields(BaseModel):
    """Editable connection fields shared by create and update requests."""

    connection_type: str | None = None
    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)
    username: str | None = None
    domain: str | None = None
    default_database: str | None = None
    uri: str | None = None
    ssh_enabled: bool | None = None
    ssh_host: str | None = None
    ssh_port: int | None = Field(default=None, ge=1, le=65535)
    ssh_mode: str | None = None
    ssh_keyfile: str | None = None
    ssh_username: str | None = None
    ssh_bastion_host: str | None = None
    ssl: bool | None = None
    label_color: str | None = Field(default=None, max_length=32)
    remember_password: bool | None = None
    password: SecretStr | None = None
    ssh_password: SecretStr | None = None
    ssh_keyfile_password: SecretStr | None = None

    @field_validator("ssh_mode")
    @classmethod
    def validate_ssh_mode(cls, v: str | None) -> str | None:
        if v is not None and v not in SSH_MODES:
            raise ValueError(f"ssh_mode must be one of: {', '.join(SSH_MODES)}")
        return v


class SavedProfileCreate(SavedProfileFields):
    """Request to create a saved connection."""

    name: str = Field(..., min_length=1, max_length=255)


class SavedProfileUpdate(SavedProfileFields):
    """Partial update; only fields sent are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=255)


class ImportUrlRequest(BaseModel):
    """Request to create a saved connection from a connection URL."""

    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1)
    remember_password: bool = True


class SavedProfileResponse(BaseModel):
    """Saved connection without its secrets."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    label_color: str | None
    connection_type: str | None
    host: str | None
    port: int | None
    username: str | None
    domain: str | None
    default_database: str | None
    uri: str | None
    ssh_enabled: bool
    ssh_host: str | None
    ssh_port: int | None
    ssh_mode: str
    ssh_keyfile: str | None
    ssh_username: str | None
    ssh_bastion_host: str | None
    ssl: bool
    remember_password: bool
    has_password: bool
    has_ssh_password: bool
    has_ssh_keyfile_password: bool
    hash: str
    simple_connection_string: str
    full_connection_string: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: SavedProfile) -> "SavedProfileResponse":
        return cls(
            id=profile.id,
            name=profile.name,
            label_color=profile.label_color,
            connection_type=profile.connection_type,
            host=profile.host,
            port=profile.port,
            username=profile.username,
            domain=profile.domain,
            default_database=profile.default_database,
            uri=profile.uri,
            ssh_enabled=profile.ssh_enabled,
            ssh_host=profile.ssh_host,
            ssh_port=profile.ssh_port,
            ssh_mode=profile.ssh_mode,
            ssh_keyfile=profile.ssh_keyfile,
            ssh_username=profile.ssh_username,
            ssh_bastion_host=profile.ssh_bastion_host,
            ssl=profile.ssl,
            remember_password=profile.remember_password,
            has_password=profile.password is not None,
            has_ssh_password=profile.ssh_password is not None,
            has_ssh_keyfile_password=profile.ssh_keyfile_password is not None,
            hash=profile.hash,
            simple_connection_string=profile.simple_connection_string,
            full_connection_string=profile.full_connection_string,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class SavedProfileSecretsResponse(BaseModel):
    """Decrypted secrets of a saved connection."""

    model_config = ConfigDict(frozen=True)

    password: str | None = None
    ssh_password: str | None = None
    ssh_keyfile_password: str | None = None
