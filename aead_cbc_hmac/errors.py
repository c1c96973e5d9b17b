"""
Errors raised by the AEAD cipher.

Two kinds only:
    InvalidCryptoKey   — the key is unusable (wrong size). A caller or
                         configuration bug; safe to log the key length.
    InvalidCiphertext  — the blob failed authentication or is malformed.
                         A possible security event; never says which
                         check failed.
"""

from typing import Mapping, Optional


class CryptoError(Exception):
    """Base class carrying a message, an optional cause and optional context."""

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 context: Optional[Mapping] = None):
        super().__init__(message)
        self.message = message
        self.cause   = cause
        self.context = dict(context) if context else {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self):
        if not self.context:
            return self.message
        ctx = ", ".join(f"{k}={v}" for k, v in sorted(self.context.items()))
        return f"{self.message} [{ctx}]"


class InvalidCryptoKey(CryptoError):
    """The supplied key does not match what the cipher expects."""


class InvalidCiphertext(CryptoError):
    """Authentication failed, or the ciphertext is truncated or malformed."""
