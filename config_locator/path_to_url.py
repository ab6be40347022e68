"""Conversion of filesystem paths to ``file:`` URLs."""

from pathlib import Path


def path_to_url(path: Path | str) -> str:
    """Return the percent-encoded ``file:`` URL of the absolute form of a path."""
    return Path(path).absolute().as_uri()
