"""Password obfuscation with XOR, XTEA and Salsa20, stored as base64 text."""

__version__ = "0.1.0"
__all__ = ["base64codec", "errors", "salsa20", "xor", "xtea"]