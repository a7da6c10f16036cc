"""Abstract base class for vault implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class _AbstractImpl(ABC):
    """Abstract interface for a vault backend.

    Notes and attachments are addressed by absolute paths inside ``vault_path``.
    """

    @property
    @abstractmethod
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        pass

    @abstractmethod
    def iter_markdown_files(self) -> Iterator[Path]:
        """Iterate over all notes in the vault."""
        pass

    @abstractmethod
    def resolve_link(self, target: str, from_note: Path) -> Path | None:
        """Resolve a written link target to an existing file, or None."""
        pass

    @abstractmethod
    def read_text(self, note: Path) -> str:
        pass

    @abstractmethod
    def write_text(self, note: Path, text: str) -> None:
        pass

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        pass

    @abstractmethod
    def backup(self, note: Path) -> Path:
        """Copy a note to a non-colliding ``.bak`` sibling and return its path."""
        pass

    def relative_path(self, path: Path) -> str:
        """Vault-relative POSIX path, the storage identity of a file."""
        return path.relative_to(self.vault_path).as_posix()
