"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from vaultlift.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from vaultlift import __version__

        print(f"vaultlift {__version__}")
        return 0

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
