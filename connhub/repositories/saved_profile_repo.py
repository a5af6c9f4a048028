"""Saved connection repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from connhub.models import SavedProfile


class SavedProfileRepository:
    """Encapsulates saved connection queries.

    Every flush runs the pre-write hooks, so ``create`` and ``save`` raise
    ValidationError for profiles that may not be stored.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, profile_id: int) -> SavedProfile | None:
        """Find a saved connection by primary key."""
        result = await self._session.execute(
            select(SavedProfile).where(SavedProfile.id == profile_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> Sequence[SavedProfile]:
        """All saved connections ordered by name."""
        result = await self._session.execute(
            select(SavedProfile).order_by(SavedProfile.name, SavedProfile.id)
        )
        return result.scalars().all()

    async def find_by_hash(self, fingerprint: str) -> SavedProfile | None:
        """Find a saved connection pointing at the same location."""
        for profile in await self.list_all():
            if profile.hash == fingerprint:
                return profile
        return None

    async def create(self, profile: SavedProfile) -> SavedProfile:
        """Insert a new saved connection."""
        self._session.add(profile)
        await self._session.flush()
        await self._session.refresh(profile)
        return profile

    async def save(self, profile: SavedProfile) -> SavedProfile:
        """Flush pending changes on a loaded saved connection."""
        await self._session.flush()
        await self._session.refresh(profile)
        return profile

    async def delete(self, profile: SavedProfile) -> None:
        """Remove a saved connection."""
        await self._session.delete(profile)
        await self._session.flush()
