"""Resource loaders: look up logical resource names and return their URLs.

Two loader tiers are consulted by
:func:`config_locator.locate_from_classpath.locate_from_classpath`:

* a context-scoped loader, stored in a :class:`contextvars.ContextVar` so that
  each thread or asyncio task can install its own;
* a process-wide system loader, searching the directories on ``sys.path`` by
  default.

Resource names use ``/`` as separator and are always relative
(``conf/app.yml``). Absolute names and names escaping the root via ``..`` are
never found.
"""

from __future__ import annotations

import importlib.resources
import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path, PurePosixPath
from typing import Protocol

from config_locator.path_to_url import path_to_url

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Anything that can map a resource name to a URL."""

    def get_resource(self, name: str) -> str | None:
        """Return the URL of the named resource, or None if it is not found."""
        ...


def _resource_parts(name: str) -> tuple[str, ...] | None:
    """Split a resource name into path parts, rejecting unsafe names."""
    pure = PurePosixPath(name)
    if not name or pure.is_absolute() or ".." in pure.parts:
        return None
    return pure.parts


class DirectoryResourceLoader:
    """Looks up resources below a fixed list of root directories."""

    def __init__(self, roots: Iterable[Path | str]) -> None:
        """Initialize the loader with its root directories, searched in order."""
        self.roots = [Path(r) for r in roots]

    def iter_roots(self) -> Iterator[Path]:
        """Yield the root directories to search."""
        yield from self.roots

    def get_resource(self, name: str) -> str | None:
        """Return the ``file:`` URL of the first root containing the resource."""
        parts = _resource_parts(name)
        if parts is None:
            return None
        for root in self.iter_roots():
            candidate = root.joinpath(*parts)
            if candidate.exists():
                return path_to_url(candidate)
        return None


class SysPathResourceLoader(DirectoryResourceLoader):
    """Looks up resources in extra roots, then in the directories of ``sys.path``.

    ``sys.path`` is read on every lookup, so changes to it are picked up.
    """

    def __init__(self, extra_roots: Iterable[Path | str] = ()) -> None:
        """Initialize the loader with roots searched before ``sys.path``."""
        super().__init__(extra_roots)

    def iter_roots(self) -> Iterator[Path]:
        """Yield the extra roots followed by every directory on ``sys.path``."""
        yield from self.roots
        for entry in list(sys.path):
            # An empty entry stands for the working directory.
            root = Path(entry or ".")
            if root.is_dir():
                yield root


class PackageResourceLoader:
    """Looks up resources shipped inside an importable package."""

    def __init__(self, package: str) -> None:
        """Initialize the loader for the given package name."""
        self.package = package

    def get_resource(self, name: str) -> str | None:
        """Return the ``file:`` URL of a packaged resource.

        Resources that do not live on the local filesystem (e.g. inside a zip
        archive) have no ``file:`` URL and are reported as not found.
        """
        parts = _resource_parts(name)
        if parts is None:
            return None
        try:
            root = importlib.resources.files(self.package)
        except ModuleNotFoundError:
            logger.warning("Package %s for resource lookup not found", self.package)
            return None

        resource = root.joinpath(*parts)
        if not resource.is_file():
            return None
        if not isinstance(resource, Path):
            logger.debug("Resource %s in %s is not a local file", name, self.package)
            return None
        return path_to_url(resource)


_context_loader: ContextVar[ResourceLoader | None] = ContextVar(
    "config_locator_context_loader", default=None
)
_system_loader: ResourceLoader = SysPathResourceLoader()


def get_context_loader() -> ResourceLoader | None:
    """Return the loader installed for the current context, if any."""
    return _context_loader.get()


def set_context_loader(loader: ResourceLoader | None) -> Token[ResourceLoader | None]:
    """Install a loader for the current context and return the reset token."""
    return _context_loader.set(loader)


@contextmanager
def context_loader(loader: ResourceLoader | None) -> Iterator[ResourceLoader | None]:
    """Install a context loader for the duration of a ``with`` block."""
    token = _context_loader.set(loader)
    try:
        yield loader
    finally:
        _context_loader.reset(token)


def get_system_loader() -> ResourceLoader:
    """Return the process-wide loader."""
    return _system_loader


def set_system_loader(loader: ResourceLoader | None) -> None:
    """Replace the process-wide loader; None restores a plain ``sys.path`` loader."""
    global _system_loader  # noqa: PLW0603
    _system_loader = loader if loader is not None else SysPathResourceLoader()
