"""vaultlift utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .expand_path import expand_path
from .get_home_dir import get_home_dir
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "expand_path",
    "get_home_dir",
    "get_logger",
]
