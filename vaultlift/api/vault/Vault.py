"""Vault public API."""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ._AbstractImpl import _AbstractImpl
from .VaultConfig import VaultConfig

SCOPE_NOTE = "note"
SCOPE_FOLDER = "folder"
SCOPE_VAULT = "vault"
SCOPES = (SCOPE_NOTE, SCOPE_FOLDER, SCOPE_VAULT)


class Vault:
    """Facade for vault operations.

    Delegates to a concrete implementation based on configuration.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, vault_config: VaultConfig):
        self.vault_config = vault_config
        self.type = vault_config.type
        self._impl: _AbstractImpl | None = None

    def __enter__(self) -> "Vault":
        from .VaultConfig import _BACKEND_REGISTRY

        backend_type = self.vault_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(
                f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )

        # Pattern: vaultlift.api.vault._obsidian._Impl
        module = __import__(f"{_BACKEND_REGISTRY[backend_type]}._Impl", fromlist=[""])
        self._impl = module._Impl(Path(self.vault_config.base_dir))
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._impl = None

    @property
    def impl(self) -> _AbstractImpl:
        if self._impl is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._impl

    @property
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        return self.impl.vault_path

    def iter_markdown_files(self) -> Iterator[Path]:
        return self.impl.iter_markdown_files()

    def list_documents(self, scope: str, active: Path | None = None) -> list[Path]:
        """List the notes selected by a scope.

        Args:
            scope: ``note``, ``folder`` or ``vault``
            active: The current note (or folder for the folder scope). Relative
                paths are taken from the vault root.

        Returns:
            Notes in path order; empty when the scope selects nothing.
        """
        if scope not in SCOPES:
            raise ValueError(f"Unknown scope: {scope!r} (supported: {list(SCOPES)})")
        if scope == SCOPE_VAULT:
            return list(self.iter_markdown_files())

        if active is None:
            return []
        active = self._absolute(active)

        if scope == SCOPE_NOTE:
            if self.vault_path not in active.parents:
                return []
            return [active] if active.is_file() and active.suffix == ".md" else []

        folder = active if active.is_dir() else active.parent
        try:
            rel = folder.relative_to(self.vault_path)
        except ValueError:
            return []
        if not rel.parts:
            return list(self.iter_markdown_files())
        return [note for note in self.iter_markdown_files() if folder in note.parents]

    def resolve_link(self, target: str, from_note: Path) -> Path | None:
        return self.impl.resolve_link(target, from_note)

    def read_text(self, note: Path) -> str:
        return self.impl.read_text(note)

    def write_text(self, note: Path, text: str) -> None:
        self.impl.write_text(note, text)

    def read_bytes(self, path: Path) -> bytes:
        return self.impl.read_bytes(path)

    def backup(self, note: Path) -> Path:
        return self.impl.backup(note)

    def relative_path(self, path: Path) -> str:
        return self.impl.relative_path(path)

    def _absolute(self, path: Path) -> Path:
        from vaultlift.utils.expand_path import expand_path

        if path.is_absolute() or str(path).startswith("~"):
            return Path(os.path.normpath(expand_path(path)))
        return Path(os.path.normpath(self.vault_path / path))
