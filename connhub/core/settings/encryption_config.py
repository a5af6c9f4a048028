"""Secret-column encryption configuration."""

from pathlib import Path

from pydantic import BaseModel, SecretStr


class EncryptionConfig(BaseModel, frozen=True):
    """Where the column encryption key comes from.

    An inline ``key`` wins over ``key_file``.
    """

    key: SecretStr | None
    key_file: Path
