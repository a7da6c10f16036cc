"""Get vaultlift home directory path or path under it."""

import os
from pathlib import Path

from ..constants import VAULTLIFT_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get vaultlift home directory path or path under it.

    Checks the VAULTLIFT_HOME environment variable first and defaults to
    ``~/.vaultlift`` if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.vaultlift")
        >>> get_home_dir("config.json")
        Path("/Users/user/.vaultlift/config.json")
    """
    home_env = os.environ.get("VAULTLIFT_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME is honoured directly for test isolation
        user_home = os.environ.get("HOME")
        home = Path(user_home) / VAULTLIFT_HOME_EXT if user_home else Path.home() / VAULTLIFT_HOME_EXT

    return home / Path(*parts) if parts else home
