"""Conversion of ``file:`` URLs back to filesystem paths."""

from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

PROTOCOL_FILE = "file"


def file_from_url(url: str) -> Path | None:
    """Convert a ``file:`` URL to a path, percent-decoding its path component.

    Returns None for URLs with any other scheme.
    """
    parts = urlsplit(url)
    if parts.scheme.lower() != PROTOCOL_FILE:
        return None
    return Path(url2pathname(parts.path))
