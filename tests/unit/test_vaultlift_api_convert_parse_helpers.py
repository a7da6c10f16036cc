"""Unit tests for the convert link-text helpers."""

import pytest

from vaultlift.api.convert._parse_markdown_dest import _parse_markdown_dest
from vaultlift.api.convert._parse_wikilink_target import _parse_wikilink_target
from vaultlift.api.convert.extract_extension import extract_extension

pytestmark = pytest.mark.convert


@pytest.mark.parametrize(
    "inner, expected",
    [
        ("file.png", ("file.png", None)),
        (" file.png | alias ", ("file.png", "alias")),
        ("file.png|", ("file.png", None)),
        ("note#heading", ("note", None)),
        ("note^block|Label", ("note", "Label")),
    ],
)
def test_parse_wikilink_target(inner, expected):
    assert _parse_wikilink_target(inner) == expected


@pytest.mark.parametrize(
    "dest_raw, expected",
    [
        ("path/to/file.png", ("path/to/file.png", None)),
        ("<path with spaces.png>", ("path with spaces.png", None)),
        ('file.png "A title"', ("file.png", None)),
        ("file.png 'A title'", ("file.png", None)),
        ("file.pdf#page=2", ("file.pdf", "#page=2")),
        ("a b.png", ("a b.png", None)),
        (r"scan\(1\).png#page=2", ("scan(1).png", "#page=2")),
    ],
)
def test_parse_markdown_dest(dest_raw, expected):
    assert _parse_markdown_dest(dest_raw) == expected


@pytest.mark.parametrize(
    "target, expected",
    [
        ("photo.PNG", "png"),
        ("dir/archive.tar.gz", "gz"),
        ("file.pdf#page=2", "pdf"),
        ("file.pdf?dl=1", "pdf"),
        ("note", None),
        ("folder/", None),
        ("", None),
        ("dotted.dir/name", None),
    ],
)
def test_extract_extension(target, expected):
    assert extract_extension(target) == expected
