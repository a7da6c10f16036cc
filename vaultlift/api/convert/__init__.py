"""Convert API module: find local attachments, upload them, rewrite their links."""

from .apply_replacements import apply_replacements
from .AttachmentRef import AttachmentRef
from .ConvertReport import ConvertReport
from .extract_attachment_refs import extract_attachment_refs
from .is_attachment_candidate import is_attachment_candidate
from .is_remote_target import is_remote_target
from .render_replacement import render_replacement
from .Replacement import Replacement

__all__ = [
    "AttachmentRef",
    "ConvertReport",
    "Replacement",
    "apply_replacements",
    "extract_attachment_refs",
    "is_attachment_candidate",
    "is_remote_target",
    "render_replacement",
]
