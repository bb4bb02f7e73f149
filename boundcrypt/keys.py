"""Key derivation from the contents of a key file."""

from __future__ import annotations

import hashlib
from typing import BinaryIO

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

CRYPTO_SALT = b""
CRYPTO_INFO = b""
KEY_SIZE = hashlib.sha512().digest_size

_CHUNK_SIZE = 8192


def hash_file_sha512(stream: BinaryIO) -> bytes:
    """Return the SHA-512 digest of everything left in a binary stream."""
    digest = hashlib.sha512()
    for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
        digest.update(chunk)
    return digest.digest()


def derive_key(input_key_material: bytes, length: int = KEY_SIZE) -> bytes:
    """Derive ``length`` bytes with HKDF-SHA512 using the fixed salt and info."""
    # An empty HMAC key and a zero-filled one of hash length give the same result.
    hkdf = HKDF(
        algorithm=hashes.SHA512(),
        length=length,
        salt=CRYPTO_SALT or None,
        info=CRYPTO_INFO,
    )
    return hkdf.derive(bytes(input_key_material))


def key_for_file(path) -> bytes:
    """Return the key material derived from the contents of the file at ``path``."""
    with open(path, "rb") as stream:
        return derive_key(hash_file_sha512(stream))