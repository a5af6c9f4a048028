"""Global dependencies for the application."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from connhub.core.config import settings
from connhub.core.database import get_async_session
from connhub.core.security import SecretCipher, load_encryption_key
from connhub.repositories.saved_profile_repo import SavedProfileRepository
from connhub.services.saved_profile_service import SavedProfileService


@lru_cache
def get_cipher() -> SecretCipher:
    """Process-wide cipher; the key is loaded once and fails fast."""
    return SecretCipher(load_encryption_key(settings.encryption))


def get_saved_profile_repository(
    session: AsyncSession = Depends(get_async_session),
) -> SavedProfileRepository:
    """Get SavedProfileRepository bound to the current session."""
    return SavedProfileRepository(session)


def get_saved_profile_service(
    repo: SavedProfileRepository = Depends(get_saved_profile_repository),
    cipher: SecretCipher = Depends(get_cipher),
    session: AsyncSession = Depends(get_async_session),
) -> SavedProfileService:
    """Get SavedProfileService with all dependencies."""
    return SavedProfileService(repo=repo, cipher=cipher, session=session)
