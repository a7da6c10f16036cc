"""Offset-safe text patcher (UNO: single function)."""

from collections.abc import Iterable

from .Replacement import Replacement


def apply_replacements(content: str, replacements: Iterable[Replacement]) -> str:
    """Return ``content`` with each replacement's span swapped for its new text.

    Replacements must not overlap; they may come in any order. Splicing runs
    from the highest ``start`` down so earlier offsets stay valid.

    Raises:
        ValueError: If two replacements overlap or a span falls outside the text
    """
    ordered = sorted(replacements, key=lambda r: r.start, reverse=True)
    result = content
    limit = len(content)
    for replacement in ordered:
        if not 0 <= replacement.start <= replacement.end <= limit:
            raise ValueError(f"Replacement span [{replacement.start}, {replacement.end}) out of range or overlapping")
        result = result[: replacement.start] + replacement.new_text + result[replacement.end :]
        limit = replacement.start
    return result
