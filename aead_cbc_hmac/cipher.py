"""
AEAD_AES_256_CBC_HMAC_SHA512
============================
AES-256-CBC + HMAC-SHA-512, encrypt-then-MAC (RFC 7518 §5.2.5).

The 64-byte composite key is split in two:
    MAC_KEY = key[0:32]    — HMAC-SHA-512
    ENC_KEY = key[32:64]   — AES-256-CBC

The tag covers everything the attacker can touch:
    HMAC(MAC_KEY, AAD || IV || CT || AL)[:32]
where AL is the bit length of AAD as a 64-bit big-endian integer.

Bundle format: iv(16) || ciphertext || tag(32)

On decrypt the tag is checked in constant time BEFORE any CBC work.
A bad tag, a truncated bundle and bad padding all raise the same
InvalidCiphertext with the same message — no padding oracle.

Dependencies: cryptography >= 41.0
"""

import logging
import os
import struct
from typing import Optional

from cryptography.hazmat.primitives import constant_time, hashes, hmac, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .entropy import IvSource, SecureRandomSource
from .errors import InvalidCiphertext, InvalidCryptoKey

logger = logging.getLogger(__name__)

_INTEGRITY_FAILURE = "Ciphertext integrity check failed."


class AeadAes256CbcHmacSha512Cipher:
    """Composite AES-256-CBC / HMAC-SHA-512 authenticated encryption."""

    ALGORITHM_NAME = "AEAD_AES_256_CBC_HMAC_SHA512"

    KEY_SIZE   = 64   # MAC key (32) + encryption key (32)
    IV_SIZE    = 16   # one AES block
    TAG_SIZE   = 32   # HMAC-SHA-512 truncated to 256 bits
    BLOCK_SIZE = 16

    def __init__(self, iv_source: Optional[IvSource] = None):
        """
        iv_source supplies the per-message IV. Leave it unset outside of
        tests; a fixed IV is only for reproducing known vectors.
        """
        self._iv_source = iv_source if iv_source is not None else SecureRandomSource()

    @staticmethod
    def generate_key() -> bytes:
        return os.urandom(AeadAes256CbcHmacSha512Cipher.KEY_SIZE)

    def encrypt(self, key: bytes, plaintext: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Encrypt and authenticate.
        associated_data is authenticated but not encrypted; may be empty.
        Returns: iv || ciphertext || tag
        """
        mac_key, enc_key = self._split_key(key)
        aad       = bytes(associated_data) if associated_data else b""
        plaintext = bytes(plaintext)

        iv =self._iv_source.random_bytes(self.IV_SIZE)
        if len(iv) != self.IV_SIZE:
            raise ValueError(f"IV source returned {len(iv)} bytes, expected {self.IV_SIZE}.")

        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext) + padder.finalize()

        encryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).encryptor()
        ct = encryptor.update(padded) + encryptor.finalize()

        tag = self._tag(mac_key, aad, iv, ct)
        logger.debug(f"Encrypt: pt={len(plaintext)}B aad={len(aad)}B bundle={len(iv) + len(ct) + len(tag)}B")
        return iv + ct + tag

    def decrypt(self, key: bytes, bundle: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Verify the tag, then decrypt.
        Raises InvalidCryptoKey for a bad key, InvalidCiphertext for anything
        wrong with the bundle or associated data.
        """
        mac_key, enc_key = self._split_key(key)
        aad    = bytes(associated_data) if associated_data else b""
        bundle = bytes(bundle)

        if len(bundle) < self.IV_SIZE + self.BLOCK_SIZE + self.TAG_SIZE:
            logger.debug("Decrypt rejected: integrity check failed.")
            raise InvalidCiphertext(_INTEGRITY_FAILURE)

        iv  = bundle[:self.IV_SIZE]
        ct  = bundle[self.IV_SIZE:-self.TAG_SIZE]
        tag = bundle[-self.TAG_SIZE:]

        if not constant_time.bytes_eq(self._tag(mac_key, aad, iv, ct), tag):
            logger.debug("Decrypt rejected: integrity check failed.")
            raise InvalidCiphertext(_INTEGRITY_FAILURE)

        try:
            decryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).decryptor()
            padded    = decryptor.update(ct) + decryptor.finalize()
            unpadder  = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            logger.debug("Decrypt rejected: integrity check failed.")
            raise InvalidCiphertext(_INTEGRITY_FAILURE) from None

        logger.debug(f"Decrypt: bundle={len(bundle)}B aad={len(aad)}B pt={len(plaintext)}B")
        return plaintext

    def _split_key(self, key: bytes):
        # bytes(int) would silently build a zero key
        if not isinstance(key, (bytes, bytearray, memoryview)):
            logger.warning(f"{self.ALGORITHM_NAME}: rejected key of type {type(key).__name__}")
            raise InvalidCryptoKey(
                f"{self.ALGORITHM_NAME} requires a {self.KEY_SIZE}-byte key.",
                context={"expected_size": self.KEY_SIZE, "actual_type": type(key).__name__},
            )
        key = bytes(key)
        if len(key) != self.KEY_SIZE:
            logger.warning(f"{self.ALGORITHM_NAME}: rejected key of {len(key)} bytes")
            raise InvalidCryptoKey(
                f"{self.ALGORITHM_NAME} requires a {self.KEY_SIZE}-byte key.",
                context={"expected_size": self.KEY_SIZE, "actual_size": len(key)},
            )
        half = self.KEY_SIZE // 2
        return key[:half], key[half:]

    def _tag(self, mac_key: bytes, aad: bytes, iv: bytes, ct: bytes) -> bytes:
        h = hmac.HMAC(mac_key, hashes.SHA512())
        h.update(aad)
        h.update(iv)
        h.update(ct)
        h.update(struct.pack('>Q', len(aad) * 8))
        return h.finalize()[:self.TAG_SIZE]

    def __repr__(self):
        return f"AeadAes256CbcHmacSha512Cipher({self.ALGORITHM_NAME}, iv_source={self._iv_source!r})"
