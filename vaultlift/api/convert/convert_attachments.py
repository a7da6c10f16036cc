"""Batch attachment conversion (UNO: single function)."""

from pathlib import Path

from ...utils.logger import get_logger
from ..mime.MimeConfig import MimeConfig
from ..store.ObjectStore import ObjectStore
from ..vault.Vault import Vault
from ._constants import (
    STATUS_ATTACHMENT,
    STATUS_REMOTE,
    STATUS_UNRESOLVED,
    STATUS_UNSUPPORTED,
)
from .apply_replacements import apply_replacements
from .classify_ref import classify_ref
from .ConvertConfig import ConvertConfig
from .ConvertReport import ConvertReport
from .extract_attachment_refs import extract_attachment_refs
from .is_attachment_candidate import is_attachment_candidate
from .render_replacement import render_replacement
from .Replacement import Replacement
from .UploadEngine import UploadEngine

logger = get_logger("convert")


def convert_attachments(
    vault: Vault,
    store: ObjectStore | None,
    mime: MimeConfig,
    options: ConvertConfig,
    active: Path | None = None,
) -> ConvertReport:
    """Upload the local attachments of the scoped notes and rewrite their links.

    Notes are processed one after another. Within a note every attachment
    reference is resolved, uploaded through a run-wide UploadEngine and
    rendered; the note is then patched in a single pass. Outside dry-run
    the note is optionally backed up and written back.

    Args:
        vault: Open vault
        store: Open object store, or None if none is configured
        mime: Supported extensions and rendering methods
        options: Scope, dry-run, backup, link mode and hash algorithm
        active: Current note (or folder) for the note and folder scopes

    Returns:
        The run report. Configuration problems (no store, nothing in scope)
        return an empty report with a single error.
    """
    report = ConvertReport()

    if store is None:
        report.errors.append("No object store configured. Check the store section of your config.")
        return report

    notes = vault.list_documents(options.scope, active)
    if not notes:
        report.errors.append("No notes found for the chosen scope.")
        return report

    engine = UploadEngine(
        vault,
        store,
        mime,
        report,
        link_mode=options.link_mode,
        dry_run=options.dry_run,
        hash_algorithm=options.hash_algorithm,
    )

    for note in notes:
        report.notes_scanned += 1
        note_rel = vault.relative_path(note)
        try:
            content = vault.read_text(note)
        except (OSError, UnicodeDecodeError) as exc:
            report.errors.append(f"Cannot read {note_rel}: {exc}")
            logger.error("Cannot read %s: %s", note_rel, exc)
            continue

        refs = [ref for ref in extract_attachment_refs(content) if is_attachment_candidate(ref.target, mime)]
        report.refs_found += len(refs)

        replacements: list[Replacement] = []
        for ref in refs:
            try:
                status, resolved = classify_ref(ref, note, vault, mime)
            except (OSError, ValueError) as exc:
                report.refs_unresolved += 1
                report.errors.append(f"Cannot resolve {ref.raw} in {note_rel}: {exc}")
                logger.error("Cannot resolve %r in %s: %s", ref.raw, note_rel, exc)
                continue
            if status == STATUS_REMOTE:
                report.refs_remote_skipped += 1
                continue
            if status == STATUS_UNRESOLVED:
                report.refs_unresolved += 1
                report.preview_lines.append(f"[UNRESOLVED] {note_rel}: {ref.raw}")
                continue
            if status == STATUS_UNSUPPORTED:
                report.attachments_unsupported += 1
                continue
            if status != STATUS_ATTACHMENT or resolved is None:
                continue

            if replacements and ref.start < replacements[-1].end:
                # text already claimed by an earlier replacement
                logger.debug("Skipping overlapping reference %r in %s", ref.raw, note_rel)
                continue

            url = engine.ensure_uploaded(resolved)
            if url is None:
                continue

            new_text = render_replacement(ref, url, resolved, mime)
            if new_text != ref.raw:
                replacements.append(Replacement(start=ref.start, end=ref.end, new_text=new_text))
                report.links_rewritten += 1
                report.preview_lines.append(f"[REWRITE] {note_rel}: {ref.raw} -> {new_text}")

        if not replacements:
            continue

        patched = apply_replacements(content, replacements)
        logger.debug("%d replacement(s) for %s", len(replacements), note_rel)

        if options.dry_run:
            continue

        try:
            if options.make_backup:
                backup_path = vault.backup(note)
                report.backup_created += 1
                logger.debug("Backed up %s to %s", note_rel, backup_path.name)
            vault.write_text(note, patched)
            report.notes_changed += 1
        except OSError as exc:
            report.errors.append(f"Cannot write {note_rel}: {exc}")
            logger.error("Cannot write %s: %s", note_rel, exc)

    logger.info(report.summary(options.dry_run))
    return report
