"""Find stored-object URLs in note text."""

import re


def find_store_urls(content: str, base_urls: list[str]) -> list[str]:
    """Return URLs in ``content`` under any of ``base_urls``, first-seen order, no duplicates.

    A URL ends at whitespace, a quote, ``]`` or ``)``.
    """
    matches: list[tuple[int, str]] = []
    for base_url in base_urls:
        if not base_url:
            continue
        safe = re.escape(base_url.rstrip("/"))
        matches.extend((match.start(), match.group(0)) for match in re.finditer(rf"{safe}/[^\"\]\)\s]*", content))

    found: list[str] = []
    for _, url in sorted(matches):
        if url not in found:
            found.append(url)
    return found
