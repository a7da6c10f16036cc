"""Reference classification (UNO: single function)."""

from pathlib import Path

from ..mime.MimeConfig import MimeConfig
from ..vault.Vault import Vault
from ._constants import (
    NOTE_EXTENSION,
    STATUS_ATTACHMENT,
    STATUS_EMPTY,
    STATUS_REMOTE,
    STATUS_UNRESOLVED,
    STATUS_UNSUPPORTED,
)
from .AttachmentRef import AttachmentRef
from .is_remote_target import is_remote_target


def classify_ref(ref: AttachmentRef, note: Path, vault: Vault, mime: MimeConfig) -> tuple[str, Path | None]:
    """Decide what to do with an attachment candidate.

    Returns:
        ``(status, resolved)`` where status is one of empty, remote,
        unresolved, unsupported or attachment. ``resolved`` is set for
        unsupported and attachment.
    """
    if not ref.target.strip():
        return STATUS_EMPTY, None
    if is_remote_target(ref.target):
        return STATUS_REMOTE, None

    resolved = vault.resolve_link(ref.target, note)
    if resolved is None:
        return STATUS_UNRESOLVED, None

    # Resolution may land on a different file than the written extension suggests
    ext = resolved.suffix.lstrip(".").lower()
    if ext == NOTE_EXTENSION or not mime.includes_extension(ext):
        return STATUS_UNSUPPORTED, resolved
    return STATUS_ATTACHMENT, resolved
