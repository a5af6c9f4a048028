"""ORM models. Importing this package registers the persistence hooks."""

from connhub.models.connection_profile import ConnectionProfile
from connhub.models.persistence import validate_and_sanitize_for_persistence
from connhub.models.saved_profile import SavedProfile

__all__ = [
    "ConnectionProfile",
    "SavedProfile",
    "validate_and_sanitize_for_persistence",
]
