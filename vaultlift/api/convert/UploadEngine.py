"""Content-addressed upload with per-run de-duplication."""

from pathlib import Path

from ...utils.logger import get_logger
from ..mime.MimeConfig import MimeConfig
from ..store.content_digest import content_digest
from ..store.generate_resource_name import generate_resource_name
from ..store.ObjectStore import ObjectStore
from ..vault.Vault import Vault
from ._constants import LINK_MODE_PUBLIC
from .ConvertReport import ConvertReport

logger = get_logger("convert")


class UploadEngine:
    """Upload vault files to the object store, at most once per file per run.

    The cache maps a file's vault-relative path to the URL computed for it.
    A file whose upload failed maps to None and is not tried again in the
    same run. One engine belongs to one run; create a new one per run.
    """

    def __init__(
        self,
        vault: Vault,
        store: ObjectStore,
        mime: MimeConfig,
        report: ConvertReport,
        *,
        link_mode: str,
        dry_run: bool,
        hash_algorithm: str = "sha1",
    ):
        self.vault = vault
        self.store = store
        self.mime = mime
        self.report = report
        self.link_mode = link_mode
        self.dry_run = dry_run
        self.hash_algorithm = hash_algorithm
        self._urls: dict[str, str | None] = {}
        self._public_fallback_warned = False

    def ensure_uploaded(self, path: Path) -> str | None:
        """Return the remote URL for ``path``, uploading the file if needed.

        Returns None if reading, hashing or uploading failed; the failure is
        counted and logged in the report.
        """
        identity = self.vault.relative_path(path)
        if identity in self._urls:
            return self._urls[identity]

        try:
            data = self.vault.read_bytes(path)
            digest = content_digest(data, self.hash_algorithm)
            key = self.store.object_key(generate_resource_name(path.name, digest))
            url = self._target_url(key)

            if self.store.object_exists(key):
                self.report.uploads_skipped_already_exists += 1
                logger.debug("Object %s already exists for %s", key, identity)
            else:
                self.report.uploads_attempted += 1
                if not self.dry_run:
                    self.store.upload(data, key, self.mime.get_mime(path.suffix))
                    self.report.uploads_succeeded += 1
                    logger.info("Uploaded %s as %s", identity, key)
        except Exception as exc:
            self.report.uploads_failed += 1
            self.report.errors.append(f"Upload failed for {identity}: {exc}")
            logger.error("Upload failed for %s: %s", identity, exc)
            self._urls[identity] = None
            return None

        self._urls[identity] = url
        return url

    def _target_url(self, key: str) -> str:
        if self.link_mode == LINK_MODE_PUBLIC:
            url = self.store.public_url(key)
            if url:
                return url
            if not self._public_fallback_warned:
                message = "Public link mode requested but no public base URL is set; falling back to proxy links"
                self.report.warnings.append(message)
                logger.warning(message)
                self._public_fallback_warned = True
        return self.store.proxy_url(key)
