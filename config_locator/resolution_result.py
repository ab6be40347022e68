"""Data model for the outcome of locating a resource."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResolutionResult:
    """Represents a located resource.

    ``winning_step`` names the search step that produced the hit. For the
    filesystem steps (``absolute``, ``base``, ``home``) ``path`` holds the
    local path behind ``url``; for ``url`` and ``classpath`` it is None.
    """

    url: str
    winning_step: str
    path: Path | None = None
