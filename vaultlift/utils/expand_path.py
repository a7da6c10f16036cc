"""Expand user path (~/...) to absolute path."""

from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """Expand user and return absolute path (no symlink resolution)."""
    return Path(path).expanduser().absolute()
