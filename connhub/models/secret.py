"""Sealed secret values and their column type."""

from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from connhub.core.security import SecretCipher


class Secret:
    """An encrypted value that can only be read with the right cipher."""

    __slots__ = ("blob",)

    def __init__(self, blob: str) -> None:
        self.blob = blob

    @classmethod
    def seal(cls, plaintext: str, cipher: SecretCipher) -> "Secret":
        """Encrypt ``plaintext`` with a fresh IV."""
        return cls(cipher.encrypt(plaintext))

    def reveal(self, cipher: SecretCipher) -> str:
        """Decrypt the value. Raises DecryptionError with the wrong key."""
        return cipher.decrypt(self.blob)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self.blob == other.blob

    def __hash__(self) -> int:
        return hash(self.blob)

    def __repr__(self) -> str:
        return "Secret('**********')"


def seal_optional(plaintext: str | None, cipher: SecretCipher) -> Secret | None:
    """Seal a value, mapping empty input to None."""
    if not plaintext:
        return None
    return Secret.seal(plaintext, cipher)


def reveal_optional(secret: Secret | None, cipher: SecretCipher) -> str | None:
    if secret is None:
        return None
    return secret.reveal(cipher)


class SecretType(TypeDecorator[Secret]):
    """Stores a Secret as its encrypted blob text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if not isinstance(value, Secret):
            raise TypeError("secret columns only accept Secret values")
        return value.blob

    def process_result_value(self, value: Any, dialect: Dialect) -> Secret | None:
        if value is None:
            return None
        return Secret(value)
