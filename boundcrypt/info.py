"""Inspection of encrypted container files without decrypting them."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import BinaryIO

from .container import IV_SIZE, PROOF_OF_KNOWLEDGE, TAG_SIZE, ContainerError
from .paths import get_file_name

_CHUNK_SIZE = 4096


@dataclass(frozen=True)
class EncryptedInfo:
    """What the header and size of a container reveal."""

    file_name: str
    key_name: str
    data_size: int


def _read_until_nul(stream: BinaryIO) -> bytes | None:
    collected = bytearray()
    for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
        end = chunk.find(b"\0")
        if end >= 0:
            collected += chunk[:end]
            return bytes(collected)
        collected += chunk
    return None


def read_info(path) -> EncryptedInfo:
    """Return the key file name and decrypted payload size stored in a container."""
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise ContainerError("Failed to open file.") from exc

    with stream:
        total_size = os.fstat(stream.fileno()).st_size
        key_name = _read_until_nul(stream)

    if key_name is None or len(key_name) + 1 == total_size:
        raise ContainerError("Failed to read key file name.")

    data_size = total_size - IV_SIZE - TAG_SIZE - len(key_name) - 1 - len(PROOF_OF_KNOWLEDGE)
    if data_size < 1:
        raise ContainerError("Failed to calculate cipher size.")

    return EncryptedInfo(
        file_name=get_file_name(path),
        key_name=os.fsdecode(key_name),
        data_size=data_size,
    )


def log_info(path) -> bool:
    """Print a container's details; return False and report to stderr on failure."""
    try:
        info = read_info(path)
    except ContainerError as exc:
        print(exc, file=sys.stderr)
        return False
    print(f"Encrypted file '{info.file_name}' info:")
    print(f"\tOriginal key name: '{info.key_name}'")
    print(f"\tDecrypted data size: {info.data_size} bytes")
    return True