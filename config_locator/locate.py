"""Entry points for locating configuration resources."""

from typing import cast

from config_locator.file_system import FileSystem, get_default_file_system
from config_locator.resource_locator import ResourceLocator

_NO_NAME = object()


def locate(
    base_path: str | None,
    name: str | None | object = _NO_NAME,
    file_system: FileSystem | None = None,
) -> str | None:
    """Return the URL of the named resource, or None if it cannot be found.

    Searches, in order: a URL built from the arguments, an absolute path, the
    base path, the user's home directory and the resource loaders. A missing
    name yields None without searching.

    Called with a single argument, ``locate(name)`` looks the name up without
    a base path.
    """
    if name is _NO_NAME:
        base_path, name = None, base_path
    result = ResourceLocator(file_system).resolve(base_path, cast("str | None", name))
    return result.url if result is not None else None


def get_url(base_path: str | None, file_name: str) -> str:
    """Build a URL from a base path and file name without searching.

    The file name may be absolute, relative or a full URL.

    Raises:
        MalformedURLError: If no URL can be formed.
    """
    return get_default_file_system().get_url(base_path, file_name)
