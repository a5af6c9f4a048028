"""Checks and clean-up applied to saved profiles before every write."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Connection
from sqlalchemy.orm import Mapper

from connhub.core.exceptions import ValidationError
from connhub.models.saved_profile import SavedProfile

SQLITE_PATH_REQUIRED = "database path must be set for SQLite databases"


def check_sqlite(profile: SavedProfile) -> None:
    """SQLite profiles need a database file path."""
    if profile.connection_type == "sqlite" and not profile.default_database:
        raise ValidationError(SQLITE_PATH_REQUIRED)


def maybe_clear_passwords(profile: SavedProfile) -> None:
    """Drop passwords the user did not ask us to remember."""
    if not profile.remember_password:
        profile.password = None
        profile.ssh_password = None


def validate_and_sanitize_for_persistence(profile: SavedProfile) -> SavedProfile:
    """Run the pre-write hooks in order. Raises ValidationError.

    Validation comes first so a rejected profile is left unmodified.
    """
    check_sqlite(profile)
    maybe_clear_passwords(profile)
    return profile


@event.listens_for(SavedProfile, "before_insert")
@event.listens_for(SavedProfile, "before_update")
def _before_write(mapper: Mapper[Any], connection: Connection, target: SavedProfile) -> None:
    validate_and_sanitize_for_persistence(target)
