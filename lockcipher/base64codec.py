"""Lenient Base64 encoding and decoding with the standard alphabet."""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALUES = {char: value for value, char in enumerate(_ALPHABET)}


def encode(data: bytes) -> str:
    """Encode bytes as padded Base64 text."""
    data = bytes(data)
    pieces: list[str] = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        b0, b1, b2 = chunk.ljust(3, b"\0")
        pieces.append(_ALPHABET[b0 >> 2])
        pieces.append(_ALPHABET[((b0 & 0x03) << 4) | (b1 >> 4)])
        pieces.append(_ALPHABET[((b1 & 0x0F) << 2) | (b2 >> 6)] if len(chunk) > 1 else "=")
        pieces.append(_ALPHABET[b2 & 0x3F] if len(chunk) > 2 else "=")
    return "".join(pieces)


def decode(encoded: str) -> bytes:
    """Decode Base64 text.

    Characters outside the alphabet (other than '=') are ignored, and a
    trailing group of fewer than four symbols is dropped.
    """
    symbols = [char for char in encoded if char == "=" or char in _VALUES]
    out = bytearray()
    groups = zip(*[iter(symbols)] * 4)
    for quad in groups:
        a, b, c, d = (0 if char == "=" else _VALUES[char] for char in quad)
        out.append(((a << 2) | (b >> 4)) & 0xFF)
        if quad[2] != "=":
            out.append(((b << 4) | (c >> 2)) & 0xFF)
        if quad[3] != "=":
            out.append(((c << 6) | d) & 0xFF)
    return bytes(out)