"""Encrypted container files keyed by the contents of another file.

Layout: key file name, NUL, 12-byte IV, AES-256-GCM ciphertext of the
proof-of-knowledge followed by the payload, 16-byte GCM tag.
"""

from __future__ import annotations

import os
import sys
from contextlib import ExitStack
from typing import BinaryIO, Callable, Iterable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .keys import derive_key, hash_file_sha512
from .paths import append_extension, get_file_name, remove_extension, split_paths

PROOF_OF_KNOWLEDGE = b"LicensedContentProof_v1"
DEFAULT_EXTENSION = ".lenc"
IV_SIZE = 12
TAG_SIZE = 16
AES_KEY_SIZE = 32

_CHUNK_SIZE = 4096


class ContainerError(Exception):
    """Raised when a container cannot be written or read back."""


def _open(stack: ExitStack, *specs: tuple[object, str]) -> list[BinaryIO]:
    try:
        return [stack.enter_context(open(path, mode)) for path, mode in specs]
    except OSError as exc:
        raise ContainerError("Failed to open one or more files.") from exc


def _cipher(key: bytes, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(key[:AES_KEY_SIZE]), modes.GCM(iv))


def encrypt_with_original(original_path, input_path, output_path) -> None:
    """Encrypt ``input_path`` into ``output_path`` using ``original_path`` as the key file."""
    with ExitStack() as stack:
        original, source = _open(stack, (original_path, "rb"), (input_path, "rb"))
        (target,) = _open(stack, (output_path, "wb"))

        key = derive_key(hash_file_sha512(original))

        key_name = get_file_name(original_path)
        target.write(os.fsencode(key_name) + b"\0")

        iv = os.urandom(IV_SIZE)
        target.write(iv)

        encryptor = _cipher(key, iv).encryptor()
        target.write(encryptor.update(PROOF_OF_KNOWLEDGE))
        for chunk in iter(lambda: source.read(_CHUNK_SIZE), b""):
            target.write(encryptor.update(chunk))
        target.write(encryptor.finalize())
        target.write(encryptor.tag)


def _read_key_name(stream: BinaryIO, total_size: int) -> bytes:
    collected = bytearray()
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            raise ContainerError("Failed to read key file name")
        end = chunk.find(b"\0")
        if end >= 0:
            collected += chunk[:end]
            break
        collected += chunk
    consumed = len(collected) + 1
    if consumed == total_size:
        raise ContainerError("Failed to read key file name")
    stream.seek(consumed)
    return bytes(collected)


def _same_file(a, b) -> bool:
    return os.path.exists(b) and os.path.samefile(a, b)


def decrypt_with_original(original_path, encrypted_path, output_path) -> None:
    """Decrypt ``encrypted_path`` into ``output_path`` using ``original_path`` as the key file."""
    with ExitStack() as stack:
        original, encrypted = _open(stack, (original_path, "rb"), (encrypted_path, "rb"))
        if _same_file(encrypted_path, output_path):
            raise ContainerError("Failed to open one or more files.")
        (target,) = _open(stack, (output_path, "wb"))

        total_size = os.fstat(encrypted.fileno()).st_size
        key = derive_key(hash_file_sha512(original))

        key_name = _read_key_name(encrypted, total_size)

        iv = encrypted.read(IV_SIZE)
        if len(iv) != IV_SIZE:
            raise ContainerError("Failed to read IV")

        decryptor = _cipher(key, iv).decryptor()
        proof = bytearray()
        remaining = total_size - IV_SIZE - TAG_SIZE - len(key_name) - 1
        while remaining > 0:
            chunk = encrypted.read(min(_CHUNK_SIZE, remaining))
            if not chunk:
                break
            remaining -= len(chunk)
            plain = decryptor.update(chunk)

            missing = len(PROOF_OF_KNOWLEDGE) - len(proof)
            if missing > 0:
                proof += plain[:missing]
                plain = plain[missing:]
                if len(proof) == len(PROOF_OF_KNOWLEDGE) and proof != PROOF_OF_KNOWLEDGE:
                    raise ContainerError(
                        "Proof-of-knowledge mismatch.  "
                        "Are you sure you are using the same input file?"
                    )
            if len(proof) == len(PROOF_OF_KNOWLEDGE):
                target.write(plain)

        tag = encrypted.read(TAG_SIZE)
        if len(tag) != TAG_SIZE:
            raise ContainerError("Failed to read GCM tag")
        try:
            target.write(decryptor.finalize_with_tag(tag))
        except InvalidTag as exc:
            raise ContainerError("DecryptFinal failed: authentication tag mismatch") from exc


def _as_list(paths) -> list[str]:
    if isinstance(paths, str):
        return split_paths(paths)
    return [os.fsdecode(os.fspath(p)) for p in paths]


def _pairs(input_paths, output_paths, default: Callable[[str], str]) -> Iterable[tuple[str, str]]:
    inputs = _as_list(input_paths)
    if output_paths is None:
        return [(path, default(path)) for path in inputs]
    return zip(inputs, _as_list(output_paths))


def _run_many(action, verb_ok, verb_failed, original_path, pairs) -> bool:
    success = True
    for source, target in pairs:
        try:
            action(original_path, source, target)
        except ContainerError as exc:
            print(exc, file=sys.stderr)
            print(f"{verb_failed} '{source}' to '{target}'")
            success = False
        else:
            print(f"{verb_ok} '{source}' to '{target}'")
    return success


def encrypt_many(original_path, input_paths, output_paths=None) -> bool:
    """Encrypt each input; return True only if every file succeeded.

    Paths are lists or ``;``-separated strings. Without outputs, each input
    gets ``.lenc`` appended; with them, pairs stop at the shorter list.
    """
    pairs = _pairs(input_paths, output_paths, lambda p: append_extension(p, DEFAULT_EXTENSION))
    return _run_many(
        encrypt_with_original,
        "Successfully encrypted",
        "Failed to encrypt",
        original_path,
        pairs,
    )


def decrypt_many(original_path, input_paths, output_paths=None) -> bool:
    """Decrypt each input; return True only if every file succeeded.

    Without outputs, each input loses a trailing ``.lenc``.
    """
    pairs = _pairs(input_paths, output_paths, lambda p: remove_extension(p, DEFAULT_EXTENSION))
    return _run_many(
        decrypt_with_original,
        "Successfully decrypted",
        "Failed to decrypt",
        original_path,
        pairs,
    )