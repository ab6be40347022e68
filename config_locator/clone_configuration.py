"""Logic for cloning configurations."""

from typing import TypeVar

from config_locator.configuration import Cloneable

T = TypeVar("T")


def clone_configuration(config: Cloneable[T] | None) -> T | None:
    """Return a copy of the configuration, or None if it is None."""
    if config is None:
        return None
    return config.clone()
