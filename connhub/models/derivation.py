"""Field derivation rules for connection profiles.

Some profile fields drive others: writing ``connection_type`` normalizes it
and resets ``port`` to the engine default, and writing ``ssh_mode`` clears
the secrets of the tunnel modes that are no longer selected. These rules
live here as plain functions instead of attribute setters, so every write
that needs them goes through :func:`update_profile`.

Note that a connection type with a conventional port always overwrites
``port``, including a port the user chose earlier. Set ``port`` after
``connection_type`` to keep a custom one.
"""

from typing import Any, Protocol

from connhub.core.paths import resolve_home_path
from connhub.models.connection_types import default_port_for, normalize_connection_type

SSH_MODES: tuple[str, ...] = ("agent", "userpass", "keyfile")
DEFAULT_SSH_MODE = "agent"
DEFAULT_SSH_KEYFILE = "~/.ssh/id_rsa"


class ProfileFields(Protocol):
    ssh_keyfile: str | None


def connection_type_changes(raw: str | None) -> dict[str, Any]:
    """Writes implied by setting the connection type."""
    connection_type = normalize_connection_type(raw)
    changes: dict[str, Any] = {"connection_type": connection_type}
    port = default_port_for(connection_type)
    if port is not None:
        changes["port"] = port
    return changes


def ssh_mode_changes(profile: ProfileFields, mode: str) -> dict[str, Any]:
    """Writes implied by setting the SSH mode.

    The mode itself is stored as given, known or not.
    """
    changes: dict[str, Any] = {"ssh_mode": mode}
    if mode != "userpass":
        changes["ssh_password"] = None
    if mode != "keyfile":
        changes["ssh_keyfile"] = None
        changes["ssh_keyfile_password"] = None
    elif not profile.ssh_keyfile:
        changes["ssh_keyfile"] = resolve_home_path(DEFAULT_SSH_KEYFILE)
    return changes


def derive_changes(profile: ProfileFields, field: str, value: Any) -> dict[str, Any]:
    """Every attribute write implied by setting ``field`` to ``value``."""
    if field == "connection_type":
        return connection_type_changes(value)
    if field == "ssh_mode":
        return ssh_mode_changes(profile, value)
    return {field: value}


def update_profile(profile: Any, field: str, value: Any) -> Any:
    """Set ``field`` on ``profile`` along with its derived fields."""
    if not hasattr(profile, field):
        raise AttributeError(f"{type(profile).__name__} has no field '{field}'")
    for name, derived in derive_changes(profile, field, value).items():
        # secret columns only exist on saved profiles
        if hasattr(profile, name):
            setattr(profile, name, derived)
    return profile
