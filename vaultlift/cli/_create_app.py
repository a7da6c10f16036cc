"""Create the main Typer CLI app."""

import typer

from vaultlift.cli.config import config
from vaultlift.cli.convert import convert


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Move Obsidian vault attachments to an object store and relink them",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(convert(), name="convert")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Log debug details to the log file"),
    ) -> None:
        import logging

        from vaultlift.utils.logger import configure_logging

        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        configure_logging(level=logging.DEBUG if verbose else logging.INFO)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
