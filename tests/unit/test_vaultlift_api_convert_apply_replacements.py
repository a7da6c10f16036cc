"""Unit tests for vaultlift.api.convert.apply_replacements."""

import pytest

from vaultlift.api.convert.apply_replacements import apply_replacements
from vaultlift.api.convert.Replacement import Replacement

pytestmark = pytest.mark.convert


def test_replacements_in_any_order():
    spans = [Replacement(1, 2, "XX"), Replacement(4, 6, "")]

    assert apply_replacements("abcdef", spans) == "aXXcd"
    assert apply_replacements("abcdef", list(reversed(spans))) == "aXXcd"


def test_no_replacements_returns_text_unchanged():
    assert apply_replacements("unchanged", []) == "unchanged"


def test_adjacent_spans():
    assert apply_replacements("ab", [Replacement(0, 1, "1"), Replacement(1, 2, "2")]) == "12"


def test_length_and_untouched_text_preserved():
    content = "head ![[a.png]] middle [[b.pdf]] tail"
    first = content.index("![[a.png]]")
    second = content.index("[[b.pdf]]")
    spans = [
        Replacement(first, first + len("![[a.png]]"), "![](http://h/a-1.png)"),
        Replacement(second, second + len("[[b.pdf]]"), "[b](http://h/b-2.pdf)"),
    ]

    patched = apply_replacements(content, spans)

    delta = sum(len(s.new_text) - (s.end - s.start) for s in spans)
    assert len(patched) == len(content) + delta
    assert patched == "head ![](http://h/a-1.png) middle [b](http://h/b-2.pdf) tail"


def test_overlapping_spans_raise():
    with pytest.raises(ValueError, match="overlapping"):
        apply_replacements("abcdef", [Replacement(1, 3, "X"), Replacement(2, 4, "Y")])


def test_span_out_of_range_raises():
    with pytest.raises(ValueError):
        apply_replacements("abc", [Replacement(2, 10, "X")])
