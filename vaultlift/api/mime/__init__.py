"""Media-type tables for attachment classification and rendering."""

from .MimeConfig import METHOD_IFRAME, METHOD_IMG, METHOD_LINK, MimeConfig

__all__ = ["METHOD_IFRAME", "METHOD_IMG", "METHOD_LINK", "MimeConfig"]
