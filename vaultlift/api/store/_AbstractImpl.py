"""Abstract base class for object store implementations."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    def object_exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def upload(self, data: bytes, key: str, content_type: str) -> None:
        pass

    @abstractmethod
    def list_keys(self) -> list[str]:
        pass
