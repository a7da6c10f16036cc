"""Markdown link destination parser (UNO: single function)."""

import re

_TITLE_PATTERN = re.compile(r"^(.*?)(?:\s+(\".*\"|'.*'))\s*$")
_SUFFIX_PATTERN = re.compile(r"^([^#?]+)([?#].+)?$")
_ESCAPED_PAREN_PATTERN = re.compile(r"\\([()])")


def _parse_markdown_dest(dest_raw: str) -> tuple[str, str | None]:
    """Split the text inside ``( ... )`` into ``(destination, suffix)``.

    Supports:
        - ``(path/to/file.png)``
        - ``(<path with spaces.png>)``
        - ``(path/to/file.png "optional title")``
        - ``(file.pdf#page=2)``: the ``#...``/``?...`` suffix is returned apart
        - ``(scan\\(1\\).png)``: escaped parentheses are unescaped
    """
    dest = dest_raw.strip()

    if dest.startswith("<"):
        close = dest.find(">")
        if close != -1:
            dest = dest[1:close]
    else:
        # Unencoded spaces in the destination are kept
        title_match = _TITLE_PATTERN.match(dest)
        if title_match and title_match.group(1):
            dest = title_match.group(1)

    dest = _ESCAPED_PAREN_PATTERN.sub(r"\1", dest)

    suffix_match = _SUFFIX_PATTERN.match(dest)
    if not suffix_match:
        return dest, None
    return suffix_match.group(1), suffix_match.group(2)
