"""Constants for attachment conversion (private)."""

# Reference kinds produced by the scanner
REF_KIND_OBSIDIAN_EMBED = "obsidian-embed"
REF_KIND_OBSIDIAN_LINK = "obsidian-link"
REF_KIND_MD_EMBED = "md-embed"
REF_KIND_MD_LINK = "md-link"

# Targets with these prefixes never resolve to vault files
REMOTE_PREFIXES = ("http://", "https://", "data:", "mailto:", "file:")

# Note-to-note links are never attachments
NOTE_EXTENSION = "md"

# Reference classification
STATUS_EMPTY = "empty"
STATUS_REMOTE = "remote"
STATUS_UNRESOLVED = "unresolved"
STATUS_UNSUPPORTED = "unsupported"
STATUS_ATTACHMENT = "attachment"

# Link mode that needs a public base URL
LINK_MODE_PUBLIC = "public"

IFRAME_STYLE = "overflow:hidden;height:400;width:100%"
