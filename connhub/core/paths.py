"""Filesystem path helpers."""

from pathlib import Path


def resolve_home_path(path: str) -> str:
    """Expand a leading ``~`` and return the absolute path."""
    return str(Path(path).expanduser().absolute())
