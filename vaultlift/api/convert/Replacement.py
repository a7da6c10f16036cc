"""Replacement model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Replacement:
    """Text to put in place of ``text[start:end]``."""

    start: int
    end: int
    new_text: str
