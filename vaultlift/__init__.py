"""vaultlift - upload vault attachments to an object store and rewrite their links."""

__version__ = "0.1.0"
