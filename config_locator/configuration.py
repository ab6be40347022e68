"""Interfaces shared by all configuration representations."""

import enum
import logging
from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from config_locator.errors import ConfigurationRuntimeError

logger = logging.getLogger(__name__)

T_co = TypeVar("T_co", covariant=True)


class ConfigurationKind(enum.Enum):
    """Representation of a configuration's keys."""

    FLAT = "flat"  # keys map directly to values
    HIERARCHICAL = "hierarchical"  # keys are paths into a tree


class Configuration(Protocol):
    """Minimal key/value capability required by the merge utilities."""

    @property
    def kind(self) -> ConfigurationKind:
        """Return whether the configuration is flat or hierarchical."""
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over the keys currently present."""
        ...

    def get_property(self, key: str) -> Any:
        """Return the value stored under a key, or None."""
        ...

    def set_property(self, key: str, value: Any) -> None:
        """Store a value, replacing any existing one."""
        ...

    def add_property(self, key: str, value: Any) -> None:
        """Add a value, keeping any existing ones."""
        ...


class Cloneable(Protocol[T_co]):
    """Objects that can produce an independent copy of themselves."""

    def clone(self) -> T_co:
        """Return a copy that shares no mutable state with the original."""
        ...


class ErrorReportingConfiguration:
    """Base for configurations that report errors instead of raising them.

    Errors met during property access are passed to :meth:`report_error`. By
    default they are logged and the operation carries on; in fail-fast mode
    they are raised as :class:`ConfigurationRuntimeError`.
    """

    def __init__(self, *, fail_fast: bool = False) -> None:
        """Initialize error reporting, optionally in fail-fast mode."""
        self.fail_fast = fail_fast

    def report_error(self, operation: str, key: str | None, cause: Exception) -> None:
        """Log an error condition, or raise it if fail-fast mode is enabled."""
        if self.fail_fast:
            msg = f"{operation} failed for key {key!r}: {cause}"
            raise ConfigurationRuntimeError(msg, cause) from cause
        logger.warning("%s failed for key %r: %s", operation, key, cause)
