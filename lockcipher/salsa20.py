"""Salsa20-style stream encryption of stored passwords with a built-in key."""

from __future__ import annotations

import os
import struct

from lockcipher.errors import CipherError
from lockcipher.xor import _decode_stored, _fit, _plain_bytes

_MASK = 0xFFFFFFFF
BLOCK_SIZE = 64
NONCE_SIZE = 8

KEY = b"0xA5BC3FTrpMs_KeY_KdA190X_Stable"
SIGMA = b"expand 32-byte k"

_SIGMA_WORDS = struct.unpack("<4I", SIGMA)
_KEY_WORDS = struct.unpack("<8I", KEY)

# (target, first, second, rotation): x[target] ^= rotl(x[first] + x[second], rotation)
_DOUBLE_ROUND = (
    (4, 0, 12, 7), (8, 4, 0, 9), (12, 8, 4, 13), (0, 12, 8, 18),
    (9, 5, 1, 7), (13, 9, 5, 9), (1, 13, 9, 13), (5, 1, 13, 18),
    (14, 10, 6, 7), (2, 14, 10, 9), (6, 2, 14, 13), (10, 6, 2, 18),
    (3, 15, 11, 7), (7, 3, 15, 9), (11, 7, 3, 13), (15, 11, 7, 18),
    (1, 0, 3, 7), (2, 1, 0, 9), (3, 2, 1, 13), (0, 3, 2, 18),
    (6, 5, 4, 7), (7, 6, 5, 9), (4, 7, 6, 13), (5, 4, 7, 18),
    (11, 10, 9, 7), (8, 11, 10, 9), (9, 8, 11, 13), (10, 9, 8, 18),
    (12, 15, 14, 7), (13, 12, 15, 9), (14, 13, 12, 13), (15, 14, 13, 18),
)


def _rotl(value: int, count: int) -> int:
    value &= _MASK
    return ((value << count) | (value >> (32 - count))) & _MASK


def _check_nonce(nonce: bytes) -> bytes:
    nonce = bytes(nonce)
    if len(nonce) != NONCE_SIZE:
        raise CipherError(f"nonce must be {NONCE_SIZE} bytes")
    return nonce


def salsa20_block(nonce: bytes, counter: int) -> bytes:
    """Produce one 64-byte keystream block for a nonce and block counter."""
    n0, n1 = struct.unpack("<2I", _check_nonce(nonce))
    s0, s1, s2, _ = _SIGMA_WORDS
    k = _KEY_WORDS
    initial = [
        s0, k[0], k[1], k[2], k[3],
        s1, n0, n1, counter & _MASK, 0,
        s2, k[0], k[1], k[2], k[3], k[4],
    ]
    x = list(initial)
    for _ in range(10):
        for target, first, second, rotation in _DOUBLE_ROUND:
            x[target] ^= _rotl(x[first] + x[second], rotation)
    return struct.pack("<16I", *((a + b) & _MASK for a, b in zip(x, initial)))


def keystream_xor(data: bytes, nonce: bytes) -> bytes:
    """XOR data with the keystream for a nonce; the same call decrypts."""
    nonce = _check_nonce(nonce)
    data = bytes(data)
    out = bytearray()
    for start in range(0, len(data), BLOCK_SIZE):
        block = salsa20_block(nonce, start // BLOCK_SIZE)
        chunk = data[start:start + BLOCK_SIZE]
        out.extend(a ^ b for a, b in zip(chunk, block))
    return bytes(out)


def save_password(plaintext: str | bytes, nonce: bytes | None = None) -> bytes:
    """Encrypt a password, returning the nonce followed by the ciphertext.

    A random nonce is used when none is given; text after the first NUL
    is ignored.
    """
    nonce = os.urandom(NONCE_SIZE) if nonce is None else _check_nonce(nonce)
    return nonce + keystream_xor(_plain_bytes(plaintext), nonce)


def load_password(encoded: str, max_length: int | None = None) -> bytes:
    """Decrypt a password from its Base64 form.

    max_length is a buffer size including a terminator, so at most
    max_length - 1 bytes are returned.
    """
    data = _decode_stored(encoded, max_length)
    if len(data) < NONCE_SIZE:
        raise CipherError("encoded password is shorter than a nonce")
    nonce, ciphertext = data[:NONCE_SIZE], data[NONCE_SIZE:]
    return _fit(keystream_xor(ciphertext, nonce), max_length)