"""
Obsidian vault integration for vaultlift.

Implements _AbstractImpl for Obsidian-style vaults: notes are ``*.md`` files,
dot-directories (``.obsidian``, ``.trash``) are ignored, and links resolve the
way Obsidian's "first link path destination" lookup does.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

from .._AbstractImpl import _AbstractImpl

_NOTE_SUFFIX = ".md"


class _Impl(_AbstractImpl):
    """Obsidian vault implementation for attachment conversion."""

    def __init__(self, vault_path: Path):
        if not vault_path.is_dir():
            raise ValueError(f"Vault directory does not exist: {vault_path}")
        self._vault_path = vault_path
        self._file_index: list[tuple[str, Path]] | None = None

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def iter_markdown_files(self) -> Iterator[Path]:
        """Iterate all notes in the vault in path order (excludes dot-directories)."""
        for path in self._iter_files():
            if path.suffix == _NOTE_SUFFIX:
                yield path

    def read_text(self, note: Path) -> str:
        # No newline translation: CRLF and lone CR endings are kept
        return note.read_bytes().decode("utf-8")

    def write_text(self, note: Path, text: str) -> None:
        temp_path = note.with_name(note.name + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
            temp_path.replace(note)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def backup(self, note: Path) -> Path:
        """Copy note to ``name.bak``, ``name.bak.1``, ``name.bak.2``, ..."""
        target = note.with_name(f"{note.name}.bak")
        n = 0
        while target.exists():
            n += 1
            target = note.with_name(f"{note.name}.bak.{n}")
        shutil.copy2(note, target)
        return target

    def resolve_link(self, target: str, from_note: Path) -> Path | None:
        """Resolve a link target written in ``from_note``.

        Lookup order:
            1. ``/abs`` paths from the vault root
            2. paths relative to the note's folder, then to the vault root
            3. case-insensitive path-suffix match over all vault files,
               preferring the note's folder, then the shortest path

        Targets without an extension also try the ``.md`` note.
        """
        linkpath = unquote(target.strip())
        if not linkpath:
            return None

        variants = [linkpath]
        if not PurePosixPath(linkpath).suffix:
            variants.append(linkpath + _NOTE_SUFFIX)

        for variant in variants:
            if variant.startswith("/"):
                candidates = [self._vault_path / variant.lstrip("/")]
            else:
                candidates = [from_note.parent / variant, self._vault_path / variant]
            for candidate in candidates:
                inside = self._inside_vault(candidate)
                if inside is not None and self._is_file(inside):
                    return inside

        for variant in variants:
            match = self._match_by_suffix(variant.lstrip("/"), from_note)
            if match is not None:
                return match
        return None

    # Internal helpers
    def _iter_files(self) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(self._vault_path):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue
                yield Path(dirpath) / filename

    @staticmethod
    def _is_file(path: Path) -> bool:
        # Names the OS rejects (too long, invalid bytes) cannot be attachments
        try:
            return path.is_file()
        except (OSError, ValueError):
            return False

    def _inside_vault(self, candidate: Path) -> Path | None:
        normalized = Path(os.path.normpath(candidate))
        try:
            normalized.relative_to(self._vault_path)
        except ValueError:
            return None
        return normalized

    def _index(self) -> list[tuple[str, Path]]:
        if self._file_index is None:
            self._file_index = [(self.relative_path(path).lower(), path) for path in self._iter_files()]
        return self._file_index

    def _match_by_suffix(self, linkpath: str, from_note: Path) -> Path | None:
        needle = PurePosixPath(linkpath).as_posix().lower()
        if not needle or needle.startswith("../") or needle.startswith("./"):
            return None
        matches = [path for rel, path in self._index() if rel == needle or rel.endswith("/" + needle)]
        if not matches:
            return None
        same_folder = [path for path in matches if path.parent == from_note.parent]
        if same_folder:
            return same_folder[0]
        return min(matches, key=lambda path: (len(path.parts), str(path)))
