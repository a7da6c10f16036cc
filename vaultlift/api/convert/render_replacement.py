"""Replacement text renderer (UNO: single function)."""

from pathlib import Path

from ..mime.MimeConfig import METHOD_IFRAME, METHOD_IMG, MimeConfig
from ._constants import IFRAME_STYLE, REF_KIND_MD_EMBED
from .AttachmentRef import AttachmentRef


def render_replacement(ref: AttachmentRef, url: str, resolved: Path, mime: MimeConfig) -> str:
    """Render the text that replaces ``ref`` once its file lives at ``url``.

    The rendering method comes from the resolved file's media type:

        - ``iframe``: an ``<iframe>`` embed
        - ``img``: ``![alt](url)``; alt text survives only from markdown embeds
        - ``link``: ``[label](url)``; the written label, else the file stem

    Any ``#``/``?`` suffix captured from the original link is appended to the URL.
    """
    method = mime.get_method(mime.get_mime(resolved.suffix))
    url_with_suffix = f"{url}{ref.suffix or ''}"

    if method == METHOD_IFRAME:
        return f'<iframe src="{url_with_suffix}" alt="{resolved.name}" style="{IFRAME_STYLE}" allowfullscreen></iframe>'

    if method == METHOD_IMG:
        alt = (ref.label or "") if ref.kind == REF_KIND_MD_EMBED else ""
        return f"![{alt}]({url_with_suffix})"

    label = (ref.label or "").strip() or resolved.stem
    return f"[{label}]({url_with_suffix})"
