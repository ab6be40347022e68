"""Logic for writing configurations as ``key=value`` text."""

import io
from typing import TextIO

from config_locator.configuration import Configuration


def dump(configuration: Configuration, out: TextIO) -> None:
    """Write one ``key=value`` line per key, without a trailing newline."""
    lines = (f"{key}={configuration.get_property(key)}" for key in configuration.keys())
    out.write("\n".join(lines))
    out.flush()


def to_string(configuration: Configuration) -> str:
    """Return the ``key=value`` text of a configuration."""
    buf = io.StringIO()
    dump(configuration, buf)
    return buf.getvalue()
