"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Section requested, empty string for the section list")
    content: dict[str, Any] = Field(..., description="Section content or the list of available sections")
    config_path: str = Field(..., description="Path to the configuration file")


register_output_schema("config", "show", ConfigShowOutput)
