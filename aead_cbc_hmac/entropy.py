"""
IV sources
==========
The cipher draws its IVs from a pluggable source with one operation:
random_bytes(n) -> n bytes.

    SecureRandomSource  — os.urandom, the default. Thread-safe.
    FixedBytesSource    — replays a fixed value. For test vectors ONLY:
                          reusing a CBC IV under the same key leaks
                          plaintext equality of leading blocks.
"""

import os
from abc import ABC, abstractmethod


class IvSource(ABC):
    """Anything that can fill n bytes with randomness."""

    @abstractmethod
    def random_bytes(self, n: int) -> bytes:
        ...


class SecureRandomSource(IvSource):
    """Operating-system CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        return os.urandom(n)

    def __repr__(self):
        return "SecureRandomSource()"


class FixedBytesSource(IvSource):
    """
    Always returns the same bytes. The value is repeated or truncated to
    the requested length, so a 16-byte value yields that exact IV.
    """

    def __init__(self, value: bytes):
        value = bytes(value)
        if not value:
            raise ValueError("FixedBytesSource needs at least one byte.")
        self._value = value

    def random_bytes(self, n: int) -> bytes:
        reps = -(-n // len(self._value))
        return (self._value * reps)[:n]

    def __repr__(self):
        return f"FixedBytesSource({len(self._value)}B)"
