"""Helpers for file names and ``;``-separated path lists."""

from __future__ import annotations

import os
import string

MAX_FILE_PATH_SIZE = 4096
MAX_PART_SIZE = 256

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _check_path(path: str) -> str:
    path = os.fsdecode(os.fspath(path))
    if len(path) >= MAX_FILE_PATH_SIZE:
        raise ValueError(f"path is longer than {MAX_FILE_PATH_SIZE - 1} characters")
    return path


def _check_part(part: str, what: str) -> str:
    if len(part) >= MAX_PART_SIZE:
        raise ValueError(f"{what} is longer than {MAX_PART_SIZE - 1} characters")
    return part


def strequal(a: str, b: str) -> bool:
    """Return True when ``a`` with ASCII letters lower-cased equals ``b``.

    Only ``a`` is lower-cased, and strings of 256 characters or more never match.
    """
    if len(a) >= MAX_PART_SIZE:
        return False
    return a.translate(_LOWER) == b


def get_file_name(full_path) -> str:
    """Return the part of a path after its last ``/`` or ``\\``."""
    path = _check_path(full_path)
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def suffix_file_name(name, suffix: str) -> str:
    """Insert ``suffix`` before the last period of ``name``, or append it if there is none."""
    path = _check_path(name)
    _check_part(suffix, "suffix")
    dot = path.rfind(".")
    if dot < 0:
        dot = len(path)
    return path[:dot] + suffix + path[dot:]


def split_paths(text: str, separator: str = ";") -> list[str]:
    """Split ``text`` on ``separator``; a trailing separator adds no empty item."""
    if not text:
        return []
    parts = text.split(separator)
    if text.endswith(separator):
        parts.pop()
    return parts


def ensure_file_extension(path, default_ext: str) -> str:
    """Append ``default_ext`` when ``path`` contains no period at all."""
    path = _check_path(path)
    if "." in path:
        return path
    return path + _check_part(default_ext, "extension")


def append_extension(path, ext: str) -> str:
    """Return ``path`` with ``ext`` appended."""
    return _check_path(path) + _check_part(ext, "extension")


def remove_extension(path, ext: str) -> str:
    """Strip ``ext`` when it is exactly the text from the last period onwards."""
    path = _check_path(path)
    dot = path.rfind(".")
    if dot >= 0 and path[dot:] == ext:
        _check_part(ext, "extension")
        return path[:dot]
    return path