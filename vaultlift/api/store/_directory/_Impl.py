"""Object store backed by a local directory."""

from pathlib import Path

from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("Directory store config data is required")
        self.root = Path(store_config.data.root)

    def __enter__(self):
        self.root.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def object_exists(self, key: str) -> bool:
        return self._path(key).is_file()

    def upload(self, data: bytes, key: str, content_type: str) -> None:  # noqa: ARG002
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_bytes(data)
        temp_path.replace(path)

    def list_keys(self) -> list[str]:
        return sorted(p.relative_to(self.root).as_posix() for p in self.root.rglob("*") if p.is_file())

    def _path(self, key: str) -> Path:
        path = self.root / key
        if ".." in Path(key).parts:
            raise ValueError(f"Invalid object key: {key!r}")
        return path
