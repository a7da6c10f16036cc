"""Convert urls API command.

CLI: vaultlift convert urls [path] [--scope note|folder|vault]
"""

from collections.abc import Iterator

from .._output_schemas.convert import ConvertUrlsOutput
from ..StageResult import StageResult


def cmd_urls(path: str | None = None, scope: str | None = None) -> StageResult:
    """List stored-object URLs referenced from the scoped notes.

    Args:
        path: Current note (note scope) or a note/folder (folder scope)
        scope: note, folder or vault; None uses the configured default
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..store.find_store_urls import find_store_urls
        from ..store.object_key_from_url import object_key_from_url
        from ..store.ObjectStore import ObjectStore
        from ..vault.Vault import Vault
        from ._load_run_context import _load_run_context

        def fail(message: str, scope_name: str) -> None:
            result_obj.output = ConvertUrlsOutput(
                errors=[message], warnings=[], scope=scope_name, notes_scanned=0, urls=[], success=False
            ).model_dump(mode="python")
            result_obj.result = f"URL search failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config, options, active = _load_run_context(path, scope=scope)
        except ValueError as e:
            fail(str(e), scope or "")
            return
        if config.store is None:
            fail("No object store configured. Check the store section of your config.", options.scope)
            return

        bases = ObjectStore(config.store).url_bases()
        urls: list[dict[str, str]] = []
        seen: set[str] = set()
        errors: list[str] = []
        notes_scanned = 0

        yield (0.3, "Searching notes...")
        try:
            with Vault(config.vault) as vault:
                for note in vault.list_documents(options.scope, active):
                    notes_scanned += 1
                    note_rel = vault.relative_path(note)
                    try:
                        content = vault.read_text(note)
                    except (OSError, UnicodeDecodeError) as exc:
                        errors.append(f"Cannot read {note_rel}: {exc}")
                        continue
                    for url in find_store_urls(content, bases):
                        if url in seen:
                            continue
                        seen.add(url)
                        key = next((k for k in (object_key_from_url(url, b) for b in bases) if k), "")
                        urls.append({"note": note_rel, "url": url, "key": key})
        except Exception as e:
            errors.append(f"URL search failed: {e}")

        yield (1.0, "Complete")
        result_obj.output = ConvertUrlsOutput(
            errors=errors,
            warnings=[],
            scope=options.scope,
            notes_scanned=notes_scanned,
            urls=urls,
            success=len(errors) == 0,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(urls)} stored-object URL(s) in {notes_scanned} note(s)"
        result_obj.success = len(errors) == 0

    path_info = f" ({path})" if path else ""
    return StageResult(announce=f"Searching stored-object URLs{path_info}...", progress_callback=do_work)
