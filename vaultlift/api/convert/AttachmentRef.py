"""AttachmentRef model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttachmentRef:
    """One reference matched in a note.

    ``start``/``end`` are a half-open character range into the scanned text and
    ``raw`` is the exact substring at that range.
    """

    kind: str
    start: int
    end: int
    raw: str
    target: str
    label: str | None = None
    suffix: str | None = None
