"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError


def validate_output(func: Callable[..., Any], output: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize output for a ``cmd_*`` function.

    The domain is the package the command lives in (``vaultlift.api.<domain>``)
    and the command name is the function name without the ``cmd_`` prefix.
    Commands without a registered schema pass through unchanged.

    Raises:
        ValueError: If the output does not match the registered schema
    """
    from ._output_schemas import get_output_schema

    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or not func.__name__.startswith("cmd_"):
        return output
    domain = module_parts[2]
    command_name = func.__name__[len("cmd_") :]

    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output
    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
