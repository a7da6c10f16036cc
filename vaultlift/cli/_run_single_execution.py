"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

import typer

from vaultlift.api.validate_output import validate_output

from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(func: F, args: tuple, kwargs: dict, display: Display, display_format: str) -> None:
    """Run command once and display result.

    Commands handle their own exceptions and report errors through their
    output schema; anything escaping here is a programming error.
    """
    result = func(*args, **kwargs)

    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    for warning in result.output.get("warnings", []):
        display.warning(warning)

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)
