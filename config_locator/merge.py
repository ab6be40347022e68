"""Copy and append properties between configurations.

Both functions work on any :class:`~config_locator.configuration.Configuration`
and read each source value once. Passing the same object as source and
target is only safe if that configuration tolerates being modified while its
keys are iterated; this is not checked here.
"""

from config_locator.configuration import Configuration


def copy(source: Configuration, target: Configuration) -> None:
    """Copy all properties of source into target, replacing existing values."""
    for key in source.keys():
        target.set_property(key, source.get_property(key))


def append(source: Configuration, target: Configuration) -> None:
    """Add all properties of source to target, keeping existing values."""
    for key in source.keys():
        target.add_property(key, source.get_property(key))
