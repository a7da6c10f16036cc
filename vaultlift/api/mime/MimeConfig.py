"""Attachment media-type configuration."""

from __future__ import annotations

__all__ = ["METHOD_IFRAME", "METHOD_IMG", "METHOD_LINK", "MimeConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator

METHOD_IMG = "img"
METHOD_IFRAME = "iframe"
METHOD_LINK = "link"

_METHODS = (METHOD_IMG, METHOD_IFRAME, METHOD_LINK)

_DEFAULT_EXTENSIONS: dict[str, str] = {
    # images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "avif": "image/avif",
    "ico": "image/x-icon",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    # audio
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "m4a": "audio/mp4",
    "flac": "audio/flac",
    # video
    "mp4": "video/mp4",
    "webm": "video/webm",
    "mov": "video/quicktime",
    "mkv": "video/x-matroska",
    "ogv": "video/ogg",
    # documents
    "pdf": "application/pdf",
    "html": "text/html",
    "htm": "text/html",
    "txt": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
    "zip": "application/zip",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

_DEFAULT_METHODS: dict[str, str] = {
    "image/*": METHOD_IMG,
    "audio/*": METHOD_IMG,
    "video/*": METHOD_IMG,
    "text/html": METHOD_IFRAME,
}

_FALLBACK_MIME = "application/octet-stream"


class MimeConfig(BaseModel):
    """Supported attachment extensions and how each media type is rendered.

    ``methods`` keys are exact media types (``application/pdf``) or major-type
    wildcards (``image/*``). Media types without a matching key render as plain
    links.
    """

    model_config = ConfigDict(extra="forbid")

    extensions: dict[str, str] = Field(
        default_factory=lambda: dict(_DEFAULT_EXTENSIONS),
        description="File extension (without dot) to media type",
    )
    methods: dict[str, str] = Field(
        default_factory=lambda: dict(_DEFAULT_METHODS),
        description="Media type or 'type/*' wildcard to rendering method (img, iframe, link)",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: dict[str, str]) -> dict[str, str]:
        normalized: dict[str, str] = {}
        for ext, mime in v.items():
            key = ext.strip().lstrip(".").lower()
            if not key:
                raise ValueError("mime.extensions keys must be non-empty")
            normalized[key] = mime.strip().lower()
        return normalized

    @field_validator("methods")
    @classmethod
    def _validate_methods(cls, v: dict[str, str]) -> dict[str, str]:
        for mime, method in v.items():
            if method not in _METHODS:
                raise ValueError(f"Unknown rendering method {method!r} for {mime!r} (supported: {list(_METHODS)})")
        return {mime.strip().lower(): method for mime, method in v.items()}

    def includes_extension(self, extension: str) -> bool:
        return extension.lstrip(".").lower() in self.extensions

    def get_mime(self, extension: str) -> str:
        """Media type for an extension, ``application/octet-stream`` if unknown."""
        return self.extensions.get(extension.lstrip(".").lower(), _FALLBACK_MIME)

    def get_method(self, mime: str) -> str:
        """Rendering method for a media type: exact key, then wildcard, then link."""
        mime = mime.lower()
        if mime in self.methods:
            return self.methods[mime]
        wildcard = f"{mime.split('/', 1)[0]}/*"
        return self.methods.get(wildcard, METHOD_LINK)
