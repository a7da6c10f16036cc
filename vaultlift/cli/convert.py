"""Convert Typer app factory."""

import typer

from vaultlift.api.convert.cmd_run import cmd_run
from vaultlift.api.convert.cmd_scan import cmd_scan
from vaultlift.api.convert.cmd_urls import cmd_urls
from vaultlift.cli._handle_stage_result import _handle_stage_result


def _check_choice(value: str | None, choices: tuple[str, ...], option: str) -> None:
    if value is not None and value not in choices:
        typer.echo(f"Error: {option} must be one of {', '.join(choices)}, got '{value}'", err=True)
        raise typer.Exit(1)


def _pick_flag(on: bool, off: bool, on_name: str, off_name: str) -> bool | None:
    """Resolve a pair of opposing flags; None when neither is given."""
    if on and off:
        typer.echo(f"Error: {on_name} and {off_name} cannot be combined", err=True)
        raise typer.Exit(1)
    if on:
        return True
    if off:
        return False
    return None


def convert() -> typer.Typer:
    """Create and configure the convert Typer app."""
    app = typer.Typer(
        name="convert",
        help="Upload vault attachments and rewrite their links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        path: str | None = typer.Argument(None, help="Current note, or a note/folder for the folder scope"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="note, folder or vault"),
        dry_run: bool = typer.Option(False, "--dry-run", help="Preview only (the configured default)"),
        apply: bool = typer.Option(False, "--apply", help="Upload files and write changed notes"),
        backup: bool = typer.Option(False, "--backup", help="Back up notes before writing (the configured default)"),
        no_backup: bool = typer.Option(False, "--no-backup", help="Write notes without a .bak copy"),
        link_mode: str | None = typer.Option(None, "--link-mode", "-m", help="proxy or public"),
    ) -> None:
        """Upload attachments and rewrite their links (dry-run unless --apply)."""
        _check_choice(scope, ("note", "folder", "vault"), "--scope")
        _check_choice(link_mode, ("proxy", "public"), "--link-mode")
        _handle_stage_result(cmd_run)(
            path,
            scope=scope,
            dry_run=_pick_flag(dry_run, apply, "--dry-run", "--apply"),
            make_backup=_pick_flag(backup, no_backup, "--backup", "--no-backup"),
            link_mode=link_mode,
        )

    @app.command(name="scan")
    def scan_cmd(
        path: str | None = typer.Argument(None, help="Current note, or a note/folder for the folder scope"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="note, folder or vault"),
    ) -> None:
        """List attachment references and how each would be handled."""
        _check_choice(scope, ("note", "folder", "vault"), "--scope")
        _handle_stage_result(cmd_scan)(path, scope=scope)

    @app.command(name="urls")
    def urls_cmd(
        path: str | None = typer.Argument(None, help="Current note, or a note/folder for the folder scope"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="note, folder or vault"),
    ) -> None:
        """List links that point into the object store."""
        _check_choice(scope, ("note", "folder", "vault"), "--scope")
        _handle_stage_result(cmd_urls)(path, scope=scope)

    return app
