"""Convert run API command.

CLI: vaultlift convert run [path] [--scope note|folder|vault] [--dry-run/--apply]
"""

from collections.abc import Iterator

from ...constants import MAX_PREVIEW_LINES
from .._output_schemas.convert import ConvertRunOutput
from ..StageResult import StageResult


def cmd_run(
    path: str | None = None,
    scope: str | None = None,
    dry_run: bool | None = None,
    make_backup: bool | None = None,
    link_mode: str | None = None,
) -> StageResult:
    """Upload local attachments of the scoped notes and rewrite their links.

    Args:
        path: Current note (note scope) or a note/folder (folder scope)
        scope: note, folder or vault; None uses the configured default
        dry_run: Preview only; None uses the configured default
        make_backup: Write ``.bak`` copies before modifying notes
        link_mode: proxy or public
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..store.ObjectStore import ObjectStore
        from ..vault.Vault import Vault
        from ._load_run_context import _load_run_context
        from .convert_attachments import convert_attachments

        def fail(message: str, scope_name: str = "", dry: bool = True, mode: str = "") -> None:
            result_obj.output = ConvertRunOutput(
                errors=[message],
                warnings=[],
                scope=scope_name,
                dry_run=dry,
                link_mode=mode,
                counts={},
                preview=[],
                preview_total=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Conversion failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config, options, active = _load_run_context(
                path, scope=scope, dry_run=dry_run, make_backup=make_backup, link_mode=link_mode
            )
        except ValueError as e:
            fail(str(e))
            return

        yield (0.3, "Opening vault and object store...")
        try:
            with Vault(config.vault) as vault:
                if config.store is None:
                    report = convert_attachments(vault, None, config.mime, options, active)
                else:
                    with ObjectStore(config.store) as store:
                        yield (0.5, f"Converting attachments ({options.scope} scope)...")
                        report = convert_attachments(vault, store, config.mime, options, active)
        except Exception as e:
            fail(str(e), options.scope, options.dry_run, options.link_mode)
            return

        yield (1.0, "Complete")
        success = len(report.errors) == 0
        result_obj.output = ConvertRunOutput(
            errors=report.errors,
            warnings=report.warnings,
            scope=options.scope,
            dry_run=options.dry_run,
            link_mode=options.link_mode,
            counts=report.counts(),
            preview=report.preview_lines[:MAX_PREVIEW_LINES],
            preview_total=len(report.preview_lines),
            success=success,
        ).model_dump(mode="python")
        result_obj.result = report.summary(options.dry_run)
        result_obj.success = success

    path_info = f" ({path})" if path else ""
    return StageResult(
        announce=f"Converting attachments{path_info}...",
        progress_callback=do_work,
    )
