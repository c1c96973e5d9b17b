"""
aead_cbc_hmac — AEAD_AES_256_CBC_HMAC_SHA512
============================================
Composite authenticated encryption for encrypted document fields.
AES-256-CBC for confidentiality, HMAC-SHA-512 (truncated to 256 bits)
for integrity, in an encrypt-then-MAC construction.

    from aead_cbc_hmac import AeadAes256CbcHmacSha512Cipher

    cipher = AeadAes256CbcHmacSha512Cipher()
    key    = cipher.generate_key()                  # 64 bytes
    blob   = cipher.encrypt(key, b"secret", b"aad")
    assert cipher.decrypt(key, blob, b"aad") == b"secret"

Errors:
    InvalidCryptoKey   — key is not 64 bytes
    InvalidCiphertext  — tampered, truncated or malformed ciphertext

License: Apache 2.0
"""

__version__ = "1.0.0"

from .cipher  import AeadAes256CbcHmacSha512Cipher
from .entropy import IvSource, SecureRandomSource, FixedBytesSource
from .errors  import CryptoError, InvalidCryptoKey, InvalidCiphertext

__all__ = [
    "AeadAes256CbcHmacSha512Cipher",
    "IvSource",
    "SecureRandomSource",
    "FixedBytesSource",
    "CryptoError",
    "InvalidCryptoKey",
    "InvalidCiphertext",
]
