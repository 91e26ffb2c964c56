"""Repeating-key XOR obfuscation of stored passwords.

Also holds the input and output handling that every stored-password
cipher in the package shares.
"""

from __future__ import annotations

from lockcipher.base64codec import decode
from lockcipher.errors import CipherError

KEY = b"pl4nkC0nst4nt#42"


def _plain_bytes(plaintext: str | bytes) -> bytes:
    """Return the password bytes up to, not including, the first NUL."""
    raw = plaintext.encode("utf-8") if isinstance(plaintext, str) else bytes(plaintext)
    return raw.split(b"\0", 1)[0]


def _decode_stored(encoded: str, max_length: int | None) -> bytes:
    """Check the arguments of a load and return the decoded bytes."""
    if not encoded:
        raise CipherError("encoded password is empty")
    if max_length is not None and max_length <= 0:
        raise CipherError("max_length must be positive")
    data = decode(encoded)
    if not data:
        raise CipherError("encoded password decodes to nothing")
    return data


def _fit(data: bytes, max_length: int | None) -> bytes:
    """Truncate to a buffer of max_length bytes that ends in a terminator."""
    return data if max_length is None else data[:max_length - 1]


def xor_cipher(data: bytes, key: bytes) -> bytes:
    """XOR data with a key repeated over its whole length."""
    if not key:
        raise CipherError("key must not be empty")
    return bytes(byte ^ key[index % len(key)] for index, byte in enumerate(data))


def save_password(plaintext: str | bytes) -> bytes:
    """Obfuscate a password; text after the first NUL is ignored."""
    return xor_cipher(_plain_bytes(plaintext), KEY)


def load_password(encoded: str, max_length: int | None = None) -> bytes:
    """Recover a password from its Base64 form.

    max_length is a buffer size including a terminator, so at most
    max_length - 1 bytes are returned.
    """
    data = _decode_stored(encoded, max_length)
    return _fit(xor_cipher(data, KEY), max_length)