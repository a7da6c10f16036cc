"""Hex digest of file content."""

import hashlib


def content_digest(data: bytes, algorithm: str = "sha1") -> str:
    """Hash ``data`` with a hashlib algorithm and return the hex digest."""
    hasher = hashlib.new(algorithm)
    hasher.update(data)
    return hasher.hexdigest()
