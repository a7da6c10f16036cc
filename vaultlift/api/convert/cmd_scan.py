"""Convert scan API command.

CLI: vaultlift convert scan [path] [--scope note|folder|vault]
"""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.convert import ConvertScanOutput
from ..StageResult import StageResult


def cmd_scan(path: str | None = None, scope: str | None = None) -> StageResult:
    """List the attachment references of the scoped notes without uploading anything.

    Args:
        path: Current note (note scope) or a note/folder (folder scope)
        scope: note, folder or vault; None uses the configured default
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..vault.Vault import Vault
        from ._load_run_context import _load_run_context
        from .classify_ref import classify_ref
        from .extract_attachment_refs import extract_attachment_refs
        from .is_attachment_candidate import is_attachment_candidate

        yield (0.1, "Loading configuration...")
        try:
            config, options, active = _load_run_context(path, scope=scope)
        except ValueError as e:
            result_obj.output = ConvertScanOutput(
                errors=[str(e)], warnings=[], scope=scope or "", notes_scanned=0, references=[], success=False
            ).model_dump(mode="python")
            result_obj.result = f"Scan failed: {e}"
            result_obj.success = False
            return

        references: list[dict[str, Any]] = []
        errors: list[str] = []
        notes_scanned = 0

        yield (0.3, "Scanning notes...")
        try:
            with Vault(config.vault) as vault:
                notes = vault.list_documents(options.scope, active)
                if not notes:
                    errors.append("No notes found for the chosen scope.")
                for note in notes:
                    notes_scanned += 1
                    note_rel = vault.relative_path(note)
                    try:
                        content = vault.read_text(note)
                    except (OSError, UnicodeDecodeError) as exc:
                        errors.append(f"Cannot read {note_rel}: {exc}")
                        continue
                    for ref in extract_attachment_refs(content):
                        if not is_attachment_candidate(ref.target, config.mime):
                            continue
                        status, resolved = classify_ref(ref, note, vault, config.mime)
                        references.append(
                            {
                                "note": note_rel,
                                "kind": ref.kind,
                                "raw": ref.raw,
                                "target": ref.target,
                                "status": status,
                                "resolved": vault.relative_path(resolved) if resolved is not None else None,
                            }
                        )
        except Exception as e:
            errors.append(f"Scan failed: {e}")

        yield (1.0, "Complete")
        result_obj.output = ConvertScanOutput(
            errors=errors,
            warnings=[],
            scope=options.scope,
            notes_scanned=notes_scanned,
            references=references,
            success=len(errors) == 0,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(references)} attachment reference(s) in {notes_scanned} note(s)"
        result_obj.success = len(errors) == 0

    path_info = f" ({path})" if path else ""
    return StageResult(announce=f"Scanning attachment references{path_info}...", progress_callback=do_work)
