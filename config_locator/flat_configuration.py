"""In-memory flat configuration."""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from config_locator.configuration import ConfigurationKind, ErrorReportingConfiguration


class FlatConfiguration(ErrorReportingConfiguration):
    """Maps keys directly to values, keeping insertion order.

    Adding a value to an existing key turns the entry into a list. If a list
    delimiter is set, string values are split on it when stored.
    """

    kind = ConfigurationKind.FLAT

    def __init__(
        self,
        properties: Mapping[str, Any] | None = None,
        *,
        list_delimiter: str | None = None,
        fail_fast: bool = False,
    ) -> None:
        """Initialize the configuration, optionally with initial properties."""
        super().__init__(fail_fast=fail_fast)
        self.list_delimiter = list_delimiter
        self._store: dict[str, Any] = {}
        for key, value in (properties or {}).items():
            self.add_property(key, value)

    def keys(self) -> Iterator[str]:
        """Iterate over a snapshot of the keys."""
        return iter(list(self._store))

    def get_property(self, key: str) -> Any:
        """Return the value stored under a key, or None."""
        return self._store.get(key)

    def set_property(self, key: str, value: Any) -> None:
        """Store a value, replacing any existing one."""
        self._store.pop(key, None)
        self.add_property(key, value)

    def add_property(self, key: str, value: Any) -> None:
        """Add a value; a key holding values already collects them in a list."""
        if not key:
            self.report_error("add_property", key, ValueError("Empty key"))
            return

        values = self._split(value)
        if key not in self._store:
            self._store[key] = values[0] if len(values) == 1 else values
            return

        current = self._store[key]
        if not isinstance(current, list):
            current = [current]
        self._store[key] = current + values

    def clear_property(self, key: str) -> None:
        """Remove a key and its values."""
        self._store.pop(key, None)

    def is_empty(self) -> bool:
        """Check if the configuration holds no keys."""
        return not self._store

    def clone(self) -> "FlatConfiguration":
        """Return a deep copy of this configuration."""
        other = FlatConfiguration(
            list_delimiter=self.list_delimiter, fail_fast=self.fail_fast
        )
        other._store = copy.deepcopy(self._store)
        return other

    def _split(self, value: Any) -> list[Any]:
        if isinstance(value, list):
            return list(value)
        if self.list_delimiter and isinstance(value, str):
            return [part.strip() for part in value.split(self.list_delimiter)]
        return [value]
