"""Logic for turning a base path and file name into a local file path."""

from pathlib import Path
from urllib.parse import urljoin

from config_locator.file_from_url import file_from_url
from config_locator.file_system import get_default_file_system
from config_locator.is_url import is_url


def get_file(base_path: str | None, file_name: str) -> Path | None:
    """Convert a base path and file name into a path.

    Both arguments may be relative paths, absolute paths or URLs. An absolute
    file name is returned directly. Otherwise a URL is attempted (base joined
    with name, then the name alone) and converted back to a path; a URL that
    is not a ``file:`` URL yields None. Plain paths are combined by the
    default file system.
    """
    path = Path(file_name)
    if path.is_absolute():
        return path

    url: str | None = None
    try:
        if base_path and is_url(base_path):
            url = urljoin(base_path, file_name)
        elif is_url(file_name):
            url = file_name
    except ValueError:
        url = None

    if url is not None:
        return file_from_url(url)

    return get_default_file_system().construct_file(base_path, file_name)
