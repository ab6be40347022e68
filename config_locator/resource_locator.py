"""Locate a configuration resource through an ordered chain of search steps.

The chain is fixed and always evaluated in this order, stopping at the first
hit:

1. ``url``: a URL built directly by the file system (the name is a full URL,
   or the base path is a URL the name can be resolved against). The URL is
   trusted as-is; nothing is checked for existence.
2. ``absolute``: the name is an absolute local path that exists.
3. ``base``: the name combined with the base path exists.
4. ``home``: the name combined with the user's home directory exists.
5. ``classpath``: the name is found by the resource loaders.

Whether a name counts as absolute in step 2 depends on the platform; see
:mod:`config_locator.file_system`.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from config_locator.file_system import FileSystem, get_default_file_system
from config_locator.locate_from_classpath import locate_from_classpath
from config_locator.path_to_url import path_to_url
from config_locator.resolution_result import ResolutionResult

logger = logging.getLogger(__name__)

SEARCH_STEPS = ("url", "absolute", "base", "home", "classpath")

StepFunc = Callable[[FileSystem, str | None, str], ResolutionResult | None]


class ResourceLocator:
    """Resolves ``(base_path, name)`` pairs to resource URLs.

    The locator keeps no state between calls: the file system, home directory
    and loaders are consulted afresh each time, so concurrent use is safe.
    """

    def __init__(
        self,
        file_system: FileSystem | None = None,
        home_dir: Path | str | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            file_system: File system to use; the process-wide default
                (looked up per call) if None.
            home_dir: Directory searched by the ``home`` step; the current
                user's home directory (looked up per call) if None.
        """
        self.file_system = file_system
        self.home_dir = Path(home_dir) if home_dir is not None else None

    def resolve(
        self, base_path: str | None, name: str | None
    ) -> ResolutionResult | None:
        """Return the first hit of the search chain, or None if nothing matched."""
        logger.debug("locate(): base is %s, name is %s", base_path, name)
        if not name:
            return None

        file_system = self.file_system or get_default_file_system()
        steps: dict[str, StepFunc] = {
            "url": self._from_url,
            "absolute": self._from_absolute_path,
            "base": self._from_base_path,
            "home": self._from_home_dir,
            "classpath": self._from_classpath,
        }
        for step_name in SEARCH_STEPS:
            result = steps[step_name](file_system, base_path, name)
            if result is not None:
                logger.debug("Step %s located %s at %s", step_name, name, result.url)
                return result
            logger.debug("Step %s did not locate %s", step_name, name)

        return None

    def _from_url(
        self, file_system: FileSystem, base_path: str | None, name: str
    ) -> ResolutionResult | None:
        url = file_system.locate_from_url(base_path, name)
        if url is None:
            return None
        return ResolutionResult(url, "url")

    def _from_absolute_path(
        self, file_system: FileSystem, base_path: str | None, name: str
    ) -> ResolutionResult | None:
        path = Path(name)
        if not path.is_absolute() or not _exists(path):
            return None
        logger.debug("Loading configuration from the absolute path %s", name)
        return _file_result(path, "absolute")

    def _from_base_path(
        self, file_system: FileSystem, base_path: str | None, name: str
    ) -> ResolutionResult | None:
        path = file_system.construct_file(base_path, name)
        if path is None or not _exists(path):
            return None
        logger.debug("Loading configuration from the path %s", path)
        return _file_result(path, "base")

    def _from_home_dir(
        self, file_system: FileSystem, base_path: str | None, name: str
    ) -> ResolutionResult | None:
        home = self.home_dir
        if home is None:
            try:
                home = Path.home()
            except RuntimeError:
                logger.warning("Could not determine the home directory", exc_info=True)
                return None

        path = file_system.construct_file(str(home), name)
        if path is None or not _exists(path):
            return None
        logger.debug("Loading configuration from the home path %s", path)
        return _file_result(path, "home")

    def _from_classpath(
        self, file_system: FileSystem, base_path: str | None, name: str
    ) -> ResolutionResult | None:
        url = locate_from_classpath(name)
        if url is None:
            return None
        return ResolutionResult(url, "classpath")


def _exists(path: Path) -> bool:
    """Check existence, treating unreadable candidates as missing."""
    try:
        return path.exists()
    except (OSError, ValueError):
        logger.warning("Could not check for file %s", path, exc_info=True)
        return False


def _file_result(path: Path, step: str) -> ResolutionResult | None:
    try:
        url = path_to_url(path)
    except ValueError:
        logger.warning("Could not obtain URL from file %s", path, exc_info=True)
        return None
    return ResolutionResult(url, step, path)
