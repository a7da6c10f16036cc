"""Attachment reference scanner (UNO: single function)."""

import re

from ._constants import (
    REF_KIND_MD_EMBED,
    REF_KIND_MD_LINK,
    REF_KIND_OBSIDIAN_EMBED,
    REF_KIND_OBSIDIAN_LINK,
)
from ._parse_markdown_dest import _parse_markdown_dest
from ._parse_wikilink_target import _parse_wikilink_target
from .AttachmentRef import AttachmentRef

# Compiled regex patterns for performance
OBSIDIAN_EMBED_PATTERN = re.compile(r"!\[\[([^\]]+?)\]\]")
OBSIDIAN_LINK_PATTERN = re.compile(r"(?<!!)\[\[([^\]]+?)\]\]")
# Labels exclude brackets: [![alt](a.png)](b.pdf) yields only the inner embed.
# Destinations run to the first unescaped ")".
MD_EMBED_PATTERN = re.compile(r"!\[([^\[\]]*)\]\(((?:\\.|[^)\\])+)\)")
MD_LINK_PATTERN = re.compile(r"(?<!!)\[([^\[\]]*)\]\(((?:\\.|[^)\\])+)\)")


def extract_attachment_refs(content: str) -> list[AttachmentRef]:
    """Extract every wiki and markdown reference from note text.

    The four syntaxes are matched independently over the whole text and the
    results are sorted by start offset. Matches of different kinds may
    overlap; deciding which ones matter is left to the caller.

    Args:
        content: Note text

    Returns:
        AttachmentRef objects ordered by ``start``
    """
    refs: list[AttachmentRef] = []

    for kind, pattern in ((REF_KIND_OBSIDIAN_EMBED, OBSIDIAN_EMBED_PATTERN), (REF_KIND_OBSIDIAN_LINK, OBSIDIAN_LINK_PATTERN)):
        for match in pattern.finditer(content):
            linkpath, label = _parse_wikilink_target(match.group(1))
            refs.append(
                AttachmentRef(
                    kind=kind,
                    start=match.start(),
                    end=match.end(),
                    raw=match.group(0),
                    target=linkpath,
                    label=label,
                )
            )

    for kind, pattern in ((REF_KIND_MD_EMBED, MD_EMBED_PATTERN), (REF_KIND_MD_LINK, MD_LINK_PATTERN)):
        for match in pattern.finditer(content):
            dest, suffix = _parse_markdown_dest(match.group(2))
            refs.append(
                AttachmentRef(
                    kind=kind,
                    start=match.start(),
                    end=match.end(),
                    raw=match.group(0),
                    target=dest,
                    label=match.group(1),
                    suffix=suffix,
                )
            )

    # Stable sort keeps kind order for matches sharing a start offset
    refs.sort(key=lambda ref: ref.start)
    return refs
