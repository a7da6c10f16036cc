"""Wikilink inner-text parser (UNO: single function)."""


def _parse_wikilink_target(inner: str) -> tuple[str, str | None]:
    """Split ``[[...]]`` inner text into ``(linkpath, label)``.

    Handles ``file.png``, ``file.png|alias``, ``file.png|100x100`` and
    ``note#heading`` / ``note^block``; heading and block parts are dropped
    because only the file matters for resolution.
    """
    linkpath = inner.strip()
    label: str | None = None

    if "|" in linkpath:
        linkpath, alias = linkpath.split("|", 1)
        label = alias.strip() or None
        linkpath = linkpath.strip()

    linkpath = linkpath.split("#")[0].split("^")[0].strip()
    return linkpath, label
