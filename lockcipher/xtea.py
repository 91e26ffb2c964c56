"""XTEA encryption of stored passwords with a built-in key."""

from __future__ import annotations

import struct

from lockcipher.errors import CipherError
from lockcipher.xor import _decode_stored, _fit, _plain_bytes

_MASK = 0xFFFFFFFF
_DELTA = 0x9E3779B9
_ROUNDS = 32

KEY = bytes((
    0xB7, 0x4A, 0x92, 0xD3,
    0x6E, 0x5C, 0x8F, 0x13,
    0xA9, 0x22, 0xCF, 0x74,
    0x08, 0xB1, 0x3D, 0xE6,
))
KEY_WORDS: tuple[int, int, int, int] = struct.unpack(">4I", KEY)


def _mix(word: int) -> int:
    return ((word << 4) ^ (word >> 5)) + word


def encrypt_block(v0: int, v1: int, key_words) -> tuple[int, int]:
    """Encrypt one 64-bit block given as two 32-bit words."""
    k = tuple(key_words)
    v0 &= _MASK
    v1 &= _MASK
    total = 0
    for _ in range(_ROUNDS):
        v0 = (v0 + (_mix(v1) ^ (total + k[total & 3]))) & _MASK
        total = (total + _DELTA) & _MASK
        v1 = (v1 + (_mix(v0) ^ (total + k[(total >> 11) & 3]))) & _MASK
    return v0, v1


def decrypt_block(v0: int, v1: int, key_words) -> tuple[int, int]:
    """Decrypt one 64-bit block given as two 32-bit words."""
    k = tuple(key_words)
    v0 &= _MASK
    v1 &= _MASK
    total = (_DELTA * _ROUNDS) & _MASK
    for _ in range(_ROUNDS):
        v1 = (v1 - (_mix(v0) ^ (total + k[(total >> 11) & 3]))) & _MASK
        total = (total - _DELTA) & _MASK
        v0 = (v0 - (_mix(v1) ^ (total + k[total & 3]))) & _MASK
    return v0, v1


def pad(data: bytes) -> bytes:
    """Pad to a multiple of 8 bytes; always adds 1 to 8 bytes."""
    count = 8 - len(data) % 8
    return bytes(data) + bytes([count]) * count


def unpad(data: bytes) -> bytes:
    """Strip the padding added by pad, raising CipherError if it is invalid."""
    if not data:
        raise CipherError("no data to unpad")
    count = data[-1]
    if count == 0 or count > 8 or count > len(data):
        raise CipherError("invalid padding length")
    if data[-count:] != bytes([count]) * count:
        raise CipherError("invalid padding bytes")
    return bytes(data[:-count])


def _transform(data: bytes, block_function) -> bytes:
    words = struct.unpack(f">{len(data) // 4}I", data)
    out: list[int] = []
    for v0, v1 in zip(words[0::2], words[1::2]):
        out.extend(block_function(v0, v1, KEY_WORDS))
    return struct.pack(f">{len(out)}I", *out)


def save_password(plaintext: str | bytes) -> bytes:
    """Encrypt a password; text after the first NUL is ignored."""
    return _transform(pad(_plain_bytes(plaintext)), encrypt_block)


def load_password(encoded: str, max_length: int | None = None) -> bytes:
    """Decrypt a password from its Base64 form.

    max_length is a buffer size including a terminator, so at most
    max_length - 1 bytes are returned.
    """
    encrypted = _decode_stored(encoded, max_length)
    if len(encrypted) % 8:
        raise CipherError("ciphertext is not a whole number of blocks")
    return _fit(unpad(_transform(encrypted, decrypt_block)), max_length)