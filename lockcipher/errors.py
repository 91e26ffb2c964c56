"""Exceptions raised by the lockcipher package."""


class CipherError(ValueError):
    """Raised when a value cannot be encrypted, decoded or decrypted."""