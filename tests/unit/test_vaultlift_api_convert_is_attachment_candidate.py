"""Unit tests for attachment candidate and remote target predicates."""

import pytest

from vaultlift.api.convert.is_attachment_candidate import is_attachment_candidate
from vaultlift.api.convert.is_remote_target import is_remote_target
from vaultlift.api.mime.MimeConfig import MimeConfig

pytestmark = pytest.mark.convert


@pytest.mark.parametrize(
    "target, expected",
    [
        ("photo.png", True),
        ("docs/report.PDF", True),
        ("page.html", True),
        ("note.md", False),
        ("note", False),
        ("setup.exe", False),
        ("https://example.com/photo.png", True),
    ],
)
def test_is_attachment_candidate_with_defaults(target, expected):
    assert is_attachment_candidate(target, MimeConfig()) is expected


def test_is_attachment_candidate_follows_configured_extensions():
    mime = MimeConfig(extensions={"exe": "application/octet-stream"})

    assert is_attachment_candidate("setup.exe", mime) is True
    assert is_attachment_candidate("photo.png", mime) is False


@pytest.mark.parametrize(
    "target",
    [
        "http://example.com/a.png",
        "https://example.com/a.png",
        "data:image/png;base64,AAAA",
        "mailto:someone@example.com",
        "file:///tmp/a.png",
        "  https://example.com/a.png",
    ],
)
def test_remote_targets(target):
    assert is_remote_target(target) is True


@pytest.mark.parametrize("target", ["a.png", "/abs/a.png", "httpdocs/a.png", "assets/data.png"])
def test_local_targets(target):
    assert is_remote_target(target) is False
