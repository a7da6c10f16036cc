"""Unit tests for ConvertConfig and ConvertReport."""

import pytest
from pydantic import ValidationError

from vaultlift.api.convert.ConvertConfig import ConvertConfig
from vaultlift.api.convert.ConvertReport import ConvertReport

pytestmark = pytest.mark.convert


def test_defaults_are_safe():
    config = ConvertConfig()

    assert config.scope == "note"
    assert config.dry_run is True
    assert config.make_backup is True
    assert config.link_mode == "proxy"
    assert config.hash_algorithm == "sha1"


def test_hash_algorithm_is_normalized():
    assert ConvertConfig(hash_algorithm="SHA256").hash_algorithm == "sha256"


@pytest.mark.parametrize(
    "field, value",
    [("scope", "everything"), ("link_mode", "s3"), ("hash_algorithm", "nope"), ("unknown", 1)],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        ConvertConfig(**{field: value})


def test_report_counts_start_at_zero():
    counts = ConvertReport().counts()

    assert set(counts) == {
        "notes_scanned",
        "refs_found",
        "refs_remote_skipped",
        "refs_unresolved",
        "attachments_unsupported",
        "uploads_attempted",
        "uploads_skipped_already_exists",
        "uploads_succeeded",
        "uploads_failed",
        "notes_changed",
        "links_rewritten",
        "backup_created",
    }
    assert all(value == 0 for value in counts.values())


def test_report_summary():
    report = ConvertReport(notes_scanned=3, links_rewritten=5, uploads_succeeded=2)

    assert report.summary(dry_run=True) == "Dry-run: scanned 3 notes, would rewrite 5 links"
    assert report.summary(dry_run=False) == "Scanned 3 notes, rewrote 5 links, uploaded 2 files"
