"""Saved connection business logic."""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from connhub.core.exceptions import ConnectionNotFoundError, InvalidConnectionUrlError
from connhub.core.security import SecretCipher
from connhub.models import SavedProfile
from connhub.models.derivation import update_profile
from connhub.models.saved_profile import SECRET_FIELDS
from connhub.repositories.saved_profile_repo import SavedProfileRepository
from connhub.schemas.saved_profile_schema import (
    ImportUrlRequest,
    SavedProfileCreate,
    SavedProfileFields,
    SavedProfileResponse,
    SavedProfileSecretsResponse,
)

logger = structlog.get_logger()


def apply_changes(
    profile: SavedProfile, changes: dict[str, Any], cipher: SecretCipher
) -> SavedProfile:
    """Apply request fields to a profile in dependency order.

    The connection type goes first so an explicit port survives its
    default. The SSH mode, given or current, is applied last so secrets
    of tunnel modes that are not selected get cleared.
    """
    changes = dict(changes)
    if "connection_type" in changes:
        update_profile(profile, "connection_type", changes.pop("connection_type"))
    ssh_mode = changes.pop("ssh_mode", None) or profile.ssh_mode
    for field in SECRET_FIELDS:
        if field in changes:
            secret = changes.pop(field)
            plaintext = secret.get_secret_value() if secret is not None else None
            profile.set_secret(field, plaintext, cipher)
    for field, value in changes.items():
        update_profile(profile, field, value)
    update_profile(profile, "ssh_mode", ssh_mode)
    return profile


_NOT_NULLABLE = frozenset(
    {"name", "ssh_enabled", "ssh_mode", "ssl", "remember_password"}
)


def _request_changes(request: SavedProfileFields) -> dict[str, Any]:
    # SecretStr values are kept wrapped; apply_changes seals them
    changes = {field: getattr(request, field) for field in request.model_fields_set}
    return {
        field: value
        for field, value in changes.items()
        if value is not None or field not in _NOT_NULLABLE
    }


class SavedProfileService:
    """Orchestrates saved connection CRUD, URL import and secret access."""

    def __init__(
        self,
        repo: SavedProfileRepository,
        cipher: SecretCipher,
        session: AsyncSession,
    ) -> None:
        self._repo = repo
        self._cipher = cipher
        self._session = session

    async def list_profiles(self) -> list[SavedProfileResponse]:
        """All saved connections ordered by name."""
        profiles = await self._repo.list_all()
        return [SavedProfileResponse.from_profile(p) for p in profiles]

    async def get_profile(self, profile_id: int) -> SavedProfileResponse:
        profile = await self._get(profile_id)
        return SavedProfileResponse.from_profile(profile)

    async def create_profile(self, request: SavedProfileCreate) -> SavedProfileResponse:
        """Create a saved connection. Raises ValidationError if it is rejected."""
        changes = _request_changes(request)
        profile = SavedProfile(name=changes.pop("name"))
        apply_changes(profile, changes, self._cipher)
        profile = await self._repo.create(profile)
        await self._session.commit()

        logger.info(
            "Saved connection created",
            connection_id=profile.id,
            connection_type=profile.connection_type,
        )
        return SavedProfileResponse.from_profile(profile)

    async def import_url(self, request: ImportUrlRequest) -> SavedProfileResponse:
        """Create a saved connection from a connection URL."""
        profile = SavedProfile(
            name=request.name,
            remember_password=request.remember_password,
        )
        if not profile.parse(request.url, self._cipher):
            raise InvalidConnectionUrlError()
        profile = await self._repo.create(profile)
        await self._session.commit()

        logger.info(
            "Saved connection imported",
            connection_id=profile.id,
            connection_type=profile.connection_type,
        )
        return SavedProfileResponse.from_profile(profile)

    async def update_profile(
        self, profile_id: int, request: SavedProfileFields
    ) -> SavedProfileResponse:
        """Apply a partial update. Raises ValidationError if it is rejected."""
        profile = await self._get(profile_id)
        apply_changes(profile, _request_changes(request), self._cipher)
        profile = await self._repo.save(profile)
        await self._session.commit()

        logger.info("Saved connection updated", connection_id=profile.id)
        return SavedProfileResponse.from_profile(profile)

    async def delete_profile(self, profile_id: int) -> None:
        profile = await self._get(profile_id)
        await self._repo.delete(profile)
        await self._session.commit()
        logger.info("Saved connection deleted", connection_id=profile_id)

    async def reveal_secrets(self, profile_id: int) -> SavedProfileSecretsResponse:
        """Decrypt the stored secrets of a saved connection."""
        profile = await self._get(profile_id)
        return SavedProfileSecretsResponse(
            **{field: profile.reveal_secret(field, self._cipher) for field in SECRET_FIELDS}
        )

    async def _get(self, profile_id: int) -> SavedProfile:
        profile = await self._repo.find_by_id(profile_id)
        if profile is None:
            raise ConnectionNotFoundError
        return profile
