"""Filesystem abstraction used to turn a base path and a name into a location.

Nothing in this module touches the filesystem: existence checks are left to
the callers (see :mod:`config_locator.resource_locator`).

Note on absolute names: a name is absolute if :meth:`pathlib.Path.is_absolute`
says so on the running platform. A name with a leading slash such as
``/subdir/app.yml`` is absolute on POSIX but relative on Windows, where it is
resolved against the base path instead. Relative names should therefore never
start with a slash.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import urljoin

from config_locator.errors import MalformedURLError
from config_locator.file_from_url import file_from_url
from config_locator.is_url import is_url
from config_locator.path_to_url import path_to_url

logger = logging.getLogger(__name__)


class FileSystem(ABC):
    """Builds URLs and paths from a ``(base_path, file_name)`` pair."""

    @abstractmethod
    def locate_from_url(self, base_path: str | None, file_name: str) -> str | None:
        """Build a URL directly from the base path and file name, if possible."""

    @abstractmethod
    def construct_file(
        self, base_path: str | None, file_name: str | None
    ) -> Path | None:
        """Combine the base path and file name into a path handle."""

    def get_url(self, base_path: str | None, file_name: str) -> str:
        """Return a URL for the file name, falling back to a ``file:`` URL.

        An absolute file name always yields its own ``file:`` URL, whatever the
        base path.

        Raises:
            MalformedURLError: If neither a URL nor a path can be formed.
        """
        if file_name and Path(file_name).is_absolute():
            try:
                return path_to_url(file_name)
            except ValueError as exc:
                msg = f"Cannot convert path {file_name} to a URL"
                raise MalformedURLError(msg) from exc

        url = self.locate_from_url(base_path, file_name)
        if url is not None:
            return url

        path = self.construct_file(base_path, file_name)
        if path is None:
            msg = f"Cannot build a URL from base {base_path!r} and name {file_name!r}"
            raise MalformedURLError(msg)
        try:
            return path_to_url(path)
        except ValueError as exc:
            msg = f"Cannot convert path {path} to a URL"
            raise MalformedURLError(msg) from exc


class DefaultFileSystem(FileSystem):
    """File system for local paths and URLs with a known scheme."""

    def locate_from_url(self, base_path: str | None, file_name: str) -> str | None:
        """Build a URL from the name alone or from a URL base path.

        A fully qualified URL in ``file_name`` is passed through as-is. If the
        base path is a URL, the name is resolved against it following the usual
        relative reference rules (a base without a trailing slash is treated as
        a document, so its last segment is replaced).
        """
        if not file_name:
            return None
        try:
            if is_url(file_name):
                return file_name
            if base_path and is_url(base_path):
                return urljoin(base_path, file_name)
        except ValueError:
            logger.warning(
                "Could not create URL from base %s and name %s",
                base_path,
                file_name,
                exc_info=True,
            )
        return None

    def construct_file(
        self, base_path: str | None, file_name: str | None
    ) -> Path | None:
        """Combine base path and file name into a path.

        The name is used on its own if there is no base path or if it is
        absolute. A ``file:`` URL base is converted to a path first; other URL
        bases cannot address a local file and yield None.
        """
        if file_name is None:
            return None

        name = Path(file_name)
        if not base_path or name.is_absolute():
            return name

        try:
            base_is_url = is_url(base_path)
        except ValueError:
            logger.warning("Ignoring malformed base path %s", base_path, exc_info=True)
            return None

        if base_is_url:
            base = file_from_url(base_path)
            if base is None:
                return None
        else:
            base = Path(base_path)

        # Path drops a leading "./" on its own.
        return base / name


_default_file_system: FileSystem = DefaultFileSystem()


def get_default_file_system() -> FileSystem:
    """Return the process-wide file system."""
    return _default_file_system


def set_default_file_system(file_system: FileSystem | None) -> None:
    """Replace the process-wide file system; None restores the built-in one."""
    global _default_file_system  # noqa: PLW0603
    if file_system is None:
        file_system = DefaultFileSystem()
    _default_file_system = file_system
