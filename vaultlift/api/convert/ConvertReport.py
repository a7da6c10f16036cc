"""Conversion report model."""

from dataclasses import dataclass, field


@dataclass
class ConvertReport:
    notes_scanned: int = 0
    # references that look like supported attachment files
    refs_found: int = 0
    refs_remote_skipped: int = 0
    refs_unresolved: int = 0
    attachments_unsupported: int = 0
    uploads_attempted: int = 0
    uploads_skipped_already_exists: int = 0
    uploads_succeeded: int = 0
    uploads_failed: int = 0
    notes_changed: int = 0
    links_rewritten: int = 0
    backup_created: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    preview_lines: list[str] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "notes_scanned": self.notes_scanned,
            "refs_found": self.refs_found,
            "refs_remote_skipped": self.refs_remote_skipped,
            "refs_unresolved": self.refs_unresolved,
            "attachments_unsupported": self.attachments_unsupported,
            "uploads_attempted": self.uploads_attempted,
            "uploads_skipped_already_exists": self.uploads_skipped_already_exists,
            "uploads_succeeded": self.uploads_succeeded,
            "uploads_failed": self.uploads_failed,
            "notes_changed": self.notes_changed,
            "links_rewritten": self.links_rewritten,
            "backup_created": self.backup_created,
        }

    def summary(self, dry_run: bool) -> str:
        """One-line notification text for the end of a run."""
        if dry_run:
            return f"Dry-run: scanned {self.notes_scanned} notes, would rewrite {self.links_rewritten} links"
        return (
            f"Scanned {self.notes_scanned} notes, rewrote {self.links_rewritten} links, "
            f"uploaded {self.uploads_succeeded} files"
        )
