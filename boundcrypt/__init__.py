"""Encrypt and decrypt files with AES-256-GCM, keyed by another file's contents."""

__version__ = "1.0.0"
__all__ = ["paths", "keys", "container", "info", "cli"]