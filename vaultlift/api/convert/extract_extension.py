"""Extension of a link target (UNO: single function)."""


def extract_extension(target: str) -> str | None:
    """Lowercased extension of the last path segment, ignoring ``#``/``?`` suffixes.

    Returns None for empty targets, folder-like targets and names without a dot.
    """
    path = target.split("#")[0].split("?")[0].strip()
    if not path:
        return None
    last = path.split("/")[-1]
    dot = last.rfind(".")
    if dot == -1:
        return None
    return last[dot + 1 :].lower() or None
