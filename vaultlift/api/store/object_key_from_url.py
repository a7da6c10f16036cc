"""Map a stored-object URL back to its object key."""

from urllib.parse import unquote, urlsplit


def object_key_from_url(url: str, base_url: str) -> str | None:
    """Object key of ``url`` relative to ``base_url``, or None if it is not under it.

    Fragments and queries (``#page=2``) are dropped; the key is percent-decoded.
    """
    base = base_url.rstrip("/")
    if not base or not url.startswith(base + "/"):
        return None
    rest = urlsplit(url[len(base) + 1 :]).path
    return unquote(rest) or None
