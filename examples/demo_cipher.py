"""
aead_cbc_hmac — Live Demo
=========================
Run:  python examples/demo_cipher.py

Encrypts a field value, decrypts it, then shows each failure kind.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aead_cbc_hmac import (AeadAes256CbcHmacSha512Cipher, FixedBytesSource,
                           InvalidCiphertext, InvalidCryptoKey)

LINE = "═" * 70
MSG  = b'{"ssn": "123-45-6789"}'
AAD  = b"customer::1001"


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=' %(name)s %(levelname)s %(message)s')

    cipher = AeadAes256CbcHmacSha512Cipher()
    key    = cipher.generate_key()

    header(AeadAes256CbcHmacSha512Cipher.ALGORITHM_NAME)
    t0 = time.perf_counter()
    ct = cipher.encrypt(key, MSG, AAD)
    pt = cipher.decrypt(key, ct, AAD)
    elapsed = time.perf_counter() - t0
    ok("Key size",    "512 bits (256 MAC + 256 AES)")
    ok("Bundle size", f"{len(ct)} bytes (iv=16 + data + tag=32)")
    ok("Round-trip",  f"{elapsed*1000:.2f} ms")
    ok("Decrypted",   pt.decode())

    header("Fixed IV — reproducible output")
    pinned = AeadAes256CbcHmacSha512Cipher(FixedBytesSource(bytes(16)))
    a = pinned.encrypt(key, MSG, AAD)
    b = pinned.encrypt(key, MSG, AAD)
    ok("Identical bundles", str(a == b))

    header("Failures")
    tampered = bytearray(ct)
    tampered[20] ^= 0xFF
    try:
        cipher.decrypt(key, bytes(tampered), AAD)
    except InvalidCiphertext as e:
        ok("Tampered bundle", f"InvalidCiphertext — {e}")
    try:
        cipher.decrypt(key, ct, b"customer::1002")
    except InvalidCiphertext as e:
        ok("Wrong AAD",       f"InvalidCiphertext — {e}")
    try:
        cipher.encrypt(key[:32], MSG, AAD)
    except InvalidCryptoKey as e:
        ok("Short key",       f"InvalidCryptoKey — {e}")
    print(LINE + "\n")
