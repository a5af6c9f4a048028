"""Column encryption for saved connection secrets.

Values are sealed with AES-256-CBC using a fresh random IV per call. The
stored blob is ``urlsafe_b64(iv || ciphertext || tag)`` where ``tag`` is an
HMAC-SHA256 over ``iv || ciphertext``. Decryption checks the tag before
touching the ciphertext, so a wrong key or a damaged blob is rejected
instead of yielding garbage plaintext.
"""

import base64
import binascii
import os

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from connhub.core.exceptions import DecryptionError, EncryptionKeyError
from connhub.core.paths import resolve_home_path
from connhub.core.settings import EncryptionConfig

KEY_LENGTH = 32
IV_LENGTH = 16
TAG_LENGTH = 32
_BLOCK_BYTES = algorithms.AES.block_size // 8
_HKDF_INFO = b"connhub secret columns"


def generate_encryption_key() -> str:
    """Return a new random key, encoded for the ENCRYPTION_KEY setting."""
    return base64.urlsafe_b64encode(os.urandom(KEY_LENGTH)).decode()


def decode_encryption_key(encoded: str) -> bytes:
    """Decode a base64 key and check its length."""
    try:
        key = base64.urlsafe_b64decode(encoded.strip().encode())
    except (binascii.Error, ValueError) as exc:
        raise EncryptionKeyError("Encryption key is not valid base64") from exc
    if len(key) != KEY_LENGTH:
        raise EncryptionKeyError(
            f"Encryption key must be {KEY_LENGTH} bytes, got {len(key)}"
        )
    return key


def load_encryption_key(config: EncryptionConfig) -> bytes:
    """Load the column encryption key from settings or the key file."""
    if config.key is not None:
        return decode_encryption_key(config.key.get_secret_value())

    key_file = resolve_home_path(str(config.key_file))
    try:
        with open(key_file, encoding="utf-8") as handle:
            encoded = handle.read()
    except OSError as exc:
        raise EncryptionKeyError(
            f"Encryption key file cannot be read: {key_file}"
        ) from exc
    return decode_encryption_key(encoded)


class SecretCipher:
    """Encrypts and decrypts individual column values with one key."""

    algorithm = "aes-256-cbc"

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LENGTH:
            raise EncryptionKeyError(
                f"Encryption key must be {KEY_LENGTH} bytes, got {len(key)}"
            )
        derived = HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH * 2,
            salt=None,
            info=_HKDF_INFO,
        ).derive(key)
        self._cipher_key = derived[:KEY_LENGTH]
        self._mac_key = derived[KEY_LENGTH:]

    def encrypt(self, plaintext: str) -> str:
        """Seal a plaintext value into a storable blob."""
        iv = os.urandom(IV_LENGTH)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
        encryptor = Cipher(algorithms.AES(self._cipher_key), modes.CBC(iv)).encryptor()
        body = iv + encryptor.update(padded) + encryptor.finalize()
        return base64.urlsafe_b64encode(body + self._sign(body)).decode()

    def decrypt(self, blob: str) -> str:
        """Open a blob produced by :meth:`encrypt`.

        Raises DecryptionError for a wrong key, a truncated blob or any
        tampering.
        """
        try:
            raw = base64.urlsafe_b64decode(blob.encode())
        except (binascii.Error, ValueError) as exc:
            raise DecryptionError() from exc
        if len(raw) < IV_LENGTH + _BLOCK_BYTES + TAG_LENGTH:
            raise DecryptionError()

        body, tag = raw[:-TAG_LENGTH], raw[-TAG_LENGTH:]
        verifier = hmac.HMAC(self._mac_key, hashes.SHA256())
        verifier.update(body)
        try:
            verifier.verify(tag)
        except InvalidSignature as exc:
            raise DecryptionError() from exc

        iv, ciphertext = body[:IV_LENGTH], body[IV_LENGTH:]
        decryptor = Cipher(algorithms.AES(self._cipher_key), modes.CBC(iv)).decryptor()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        try:
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return plaintext.decode("utf-8")
        except ValueError as exc:
            raise DecryptionError() from exc

    def _sign(self, body: bytes) -> bytes:
        signer = hmac.HMAC(self._mac_key, hashes.SHA256())
        signer.update(body)
        return signer.finalize()
