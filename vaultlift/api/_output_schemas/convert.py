"""Output schemas for convert commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConvertRunOutput(BaseOutputSchema):
    """Output schema for convert run command."""

    scope: str = Field(..., description="Scope of notes converted (note, folder or vault)")
    dry_run: bool = Field(..., description="Whether the run only previewed changes")
    link_mode: str = Field(..., description="Link mode used for rewritten URLs (proxy or public)")
    counts: dict[str, int] = Field(..., description="Report counters keyed by name")
    preview: list[str] = Field(..., description="First preview lines of rewritten or unresolved references")
    preview_total: int = Field(..., description="Total number of preview lines produced")
    success: bool = Field(..., description="Whether the run completed without errors")


class ConvertScanOutput(BaseOutputSchema):
    """Output schema for convert scan command."""

    scope: str = Field(..., description="Scope of notes scanned")
    notes_scanned: int = Field(..., description="Number of notes scanned")
    references: list[dict[str, Any]] = Field(..., description="Attachment candidates with their classification")
    success: bool = Field(..., description="Whether the scan completed without errors")


class ConvertUrlsOutput(BaseOutputSchema):
    """Output schema for convert urls command."""

    scope: str = Field(..., description="Scope of notes scanned")
    notes_scanned: int = Field(..., description="Number of notes scanned")
    urls: list[dict[str, str]] = Field(..., description="Stored-object URLs with their object keys")
    success: bool = Field(..., description="Whether the search completed without errors")


register_output_schema("convert", "run", ConvertRunOutput)
register_output_schema("convert", "scan", ConvertScanOutput)
register_output_schema("convert", "urls", ConvertUrlsOutput)
