"""Object store public API."""

from urllib.parse import quote

from ._AbstractImpl import _AbstractImpl
from .StoreConfig import StoreConfig


class ObjectStore:
    """Public API for object store operations.

    Object keys are ``<prefix>/<name>`` (or just ``<name>`` without a prefix).
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self.prefix = store_config.prefix
        self._impl: _AbstractImpl | None = None

    def __enter__(self) -> "ObjectStore":
        from .StoreConfig import _BACKEND_REGISTRY

        backend_type = self.store_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Pattern: vaultlift.api.store._directory._Impl
        module = __import__(f"vaultlift.api.store._{backend_type}._Impl", fromlist=[""])
        self._impl = module._Impl(self.store_config)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            result = self._impl.__exit__(exc_type, exc_val, exc_tb)
            self._impl = None
            return result
        return False

    @property
    def impl(self) -> _AbstractImpl:
        if self._impl is None:
            raise RuntimeError("Object store not initialized. Use as context manager first.")
        return self._impl

    def object_key(self, name: str) -> str:
        return f"{self.prefix}/{name}" if self.prefix else name

    def object_exists(self, key: str) -> bool:
        return self.impl.object_exists(key)

    def upload(self, data: bytes, key: str, content_type: str) -> None:
        self.impl.upload(data, key, content_type)

    def list_keys(self) -> list[str]:
        return self.impl.list_keys()

    def public_url(self, key: str, base: str | None = None) -> str | None:
        """URL of an object under the public base, or None if no base is configured."""
        base = (self.store_config.public_base_url if base is None else base).rstrip("/")
        if not base:
            return None
        return f"{base}/{quote(key)}"

    def proxy_url(self, key: str, origin: str | None = None) -> str:
        """URL of an object behind the local retrieval proxy."""
        origin = (self.store_config.proxy_url if origin is None else origin).rstrip("/")
        return f"{origin}/{quote(key)}"

    def url_bases(self) -> list[str]:
        """Every configured base a stored-object URL can start with."""
        bases = [self.store_config.public_base_url, self.store_config.proxy_url]
        return [base for base in bases if base]
