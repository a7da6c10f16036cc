"""Content-addressed object name for a file."""

from pathlib import PurePosixPath


def generate_resource_name(file_name: str, digest: str) -> str:
    """Build ``<stem>-<digest><suffix>`` from a file name and its content digest.

    The same content under the same file name always maps to the same object
    name, so identical uploads collide instead of duplicating.

    Examples:
        >>> generate_resource_name("photo.png", "ab12")
        'photo-ab12.png'
        >>> generate_resource_name("scan.2024.pdf", "ab12")
        'scan.2024-ab12.pdf'
    """
    path = PurePosixPath(file_name)
    return f"{path.stem}-{digest}{path.suffix}"
