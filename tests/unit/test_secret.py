"""Tests for sealed secret values and their storage."""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from connhub.core.exceptions import DecryptionError
from connhub.core.security import SecretCipher
from connhub.models import SavedProfile
from connhub.models.secret import Secret, seal_optional


class TestSecret:
    """Seal/reveal wrapper."""

    def test_seal_and_reveal(self, cipher: SecretCipher) -> None:
        secret = Secret.seal("pw", cipher)
        assert secret.reveal(cipher) == "pw"

    def test_reveal_with_other_key(
        self, cipher: SecretCipher, other_cipher: SecretCipher
    ) -> None:
        secret = Secret.seal("pw", cipher)
        with pytest.raises(DecryptionError):
            secret.reveal(other_cipher)

    def test_repr_masks_value(self, cipher: SecretCipher) -> None:
        assert "pw" not in repr(Secret.seal("pw", cipher))

    @pytest.mark.parametrize("value", [None, ""])
    def test_seal_optional_empty(self, cipher: SecretCipher, value: str | None) -> None:
        assert seal_optional(value, cipher) is None


class TestSecretFields:
    """Secret helpers on saved profiles."""

    def test_set_and_reveal(self, cipher: SecretCipher) -> None:
        profile = SavedProfile(name="db")
        profile.set_secret("ssh_keyfile_password", "phrase", cipher)
        assert profile.reveal_secret("ssh_keyfile_password", cipher) == "phrase"

    def test_unset_secret_reveals_none(self, cipher: SecretCipher) -> None:
        assert SavedProfile(name="db").reveal_secret("password", cipher) is None

    def test_rejects_plain_field(self, cipher: SecretCipher) -> None:
        with pytest.raises(ValueError):
            SavedProfile(name="db").set_secret("username", "alice", cipher)


class TestSecretColumns:
    """Secrets are stored encrypted and come back as Secret values."""

    async def test_stored_as_ciphertext(
        self, db_session: AsyncSession, cipher: SecretCipher
    ) -> None:
        profile = SavedProfile(name="db", connection_type="mysql")
        profile.set_secret("password", "hunter2", cipher)
        db_session.add(profile)
        await db_session.commit()

        raw = await db_session.scalar(
            text("SELECT password FROM saved_connection WHERE id = :id"),
            {"id": profile.id},
        )
        assert raw is not None
        assert "hunter2" not in raw
        assert cipher.decrypt(raw) == "hunter2"

    async def test_loaded_as_secret(
        self, db_session: AsyncSession, cipher: SecretCipher
    ) -> None:
        profile = SavedProfile(name="db", connection_type="mysql")
        profile.set_secret("password", "hunter2", cipher)
        db_session.add(profile)
        await db_session.commit()
        db_session.expunge_all()

        loaded = await db_session.get(SavedProfile, profile.id)
        assert loaded is not None
        assert isinstance(loaded.password, Secret)
        assert loaded.reveal_secret("password", cipher) == "hunter2"
