"""Output schemas for API commands.

Importing this package registers every schema with the registry.
"""

from . import config, convert
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "config",
    "convert",
    "get_output_schema",
    "register_output_schema",
]
