"""Remote target predicate (UNO: single function)."""

from ._constants import REMOTE_PREFIXES


def is_remote_target(target: str) -> bool:
    """True if the target is a URL or URI that never points at a vault file."""
    return target.strip().startswith(REMOTE_PREFIXES)
