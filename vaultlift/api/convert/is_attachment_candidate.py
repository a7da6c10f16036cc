"""Attachment candidate predicate (UNO: single function)."""

from ..mime.MimeConfig import MimeConfig
from ._constants import NOTE_EXTENSION
from .extract_extension import extract_extension


def is_attachment_candidate(target: str, mime: MimeConfig) -> bool:
    """True if the target names a file type configured as an attachment.

    Note links (``.md``) and targets without an extension are never
    candidates, which keeps ordinary ``[[note]]`` links away from resolution.
    """
    ext = extract_extension(target)
    if not ext or ext == NOTE_EXTENSION:
        return False
    return mime.includes_extension(ext)
