"""In-memory hierarchical configuration."""

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from config_locator.configuration import ConfigurationKind, ErrorReportingConfiguration
from config_locator.expression_engine import DefaultExpressionEngine


@dataclass
class ConfigurationNode:
    """A node of the configuration tree.

    A node either holds a value (a leaf) or has children. Several siblings may
    share a name; together they hold the values of a multi-valued key.
    """

    name: str | None
    value: Any = None
    children: list["ConfigurationNode"] = field(default_factory=list)

    def is_leaf(self) -> bool:
        """Check if the node carries a value rather than children."""
        return not self.children

    def child(self, name: str) -> "ConfigurationNode | None":
        """Return the last child with the given name, if any."""
        for node in reversed(self.children):
            if node.name == name:
                return node
        return None

    def children_named(self, name: str) -> list["ConfigurationNode"]:
        """Return all children with the given name."""
        return [node for node in self.children if node.name == name]


class HierarchicalConfiguration(ErrorReportingConfiguration):
    """Stores properties in a tree whose paths are given by keys.

    Keys are split into node names by the expression engine. With
    ``delimiter_parsing_disabled`` set, a key is used as a single node name
    instead, so ``a.b`` becomes one top-level node rather than ``b`` below
    ``a``.
    """

    kind = ConfigurationKind.HIERARCHICAL

    def __init__(
        self,
        expression_engine: DefaultExpressionEngine | None = None,
        *,
        fail_fast: bool = False,
    ) -> None:
        """Initialize an empty configuration."""
        super().__init__(fail_fast=fail_fast)
        self.root = ConfigurationNode(None)
        self.delimiter_parsing_disabled = False
        self._expression_engine = expression_engine or DefaultExpressionEngine()

    @property
    def expression_engine(self) -> DefaultExpressionEngine:
        """Return the engine interpreting keys."""
        return self._expression_engine

    @expression_engine.setter
    def expression_engine(self, engine: DefaultExpressionEngine | None) -> None:
        self._expression_engine = engine or DefaultExpressionEngine()

    def keys(self) -> Iterator[str]:
        """Iterate over the keys of all leaf nodes, without duplicates."""
        seen: dict[str, None] = {}
        for path in self._leaf_paths(self.root, []):
            seen.setdefault(self._expression_engine.join(path))
        return iter(list(seen))

    def get_property(self, key: str) -> Any:
        """Return the value of a key; several values are returned as a list."""
        values = [node.value for node in self._find(key) if node.is_leaf()]
        if not values:
            return None
        return values[0] if len(values) == 1 else values

    def set_property(self, key: str, value: Any) -> None:
        """Replace all values of a key."""
        self.clear_property(key)
        self.add_property(key, value)

    def add_property(self, key: str, value: Any) -> None:
        """Add a value as a new leaf; lists add one leaf per element."""
        segments = self._segments(key)
        if not segments:
            self.report_error("add_property", key, ValueError("Empty key"))
            return

        parent = self.root
        for name in segments[:-1]:
            node = parent.child(name)
            if node is None:
                node = ConfigurationNode(name)
                parent.children.append(node)
            elif node.is_leaf() and node.value is not None:
                cause = ValueError(f"Node {name!r} holds a value, cannot add children")
                self.report_error("add_property", key, cause)
                return
            parent = node

        values = value if isinstance(value, list) else [value]
        for item in values:
            parent.children.append(ConfigurationNode(segments[-1], item))

    def clear_property(self, key: str) -> None:
        """Remove all leaves addressed by a key."""
        segments = self._segments(key)
        if not segments:
            return
        for parent in self._find_parents(segments):
            parent.children = [
                node
                for node in parent.children
                if node.name != segments[-1] or not node.is_leaf()
            ]

    def is_empty(self) -> bool:
        """Check if the tree has no nodes."""
        return not self.root.children

    def clone(self) -> "HierarchicalConfiguration":
        """Return a deep copy of this configuration."""
        other = HierarchicalConfiguration(
            self._expression_engine, fail_fast=self.fail_fast
        )
        other.delimiter_parsing_disabled = self.delimiter_parsing_disabled
        other.root = copy.deepcopy(self.root)
        return other

    def _segments(self, key: str) -> list[str]:
        if self.delimiter_parsing_disabled:
            return [key] if key else []
        return self._expression_engine.key_segments(key)

    def _find_parents(self, segments: list[str]) -> list[ConfigurationNode]:
        nodes = [self.root]
        for name in segments[:-1]:
            nodes = [child for node in nodes for child in node.children_named(name)]
        return nodes

    def _find(self, key: str) -> list[ConfigurationNode]:
        segments = self._segments(key)
        if not segments:
            return []
        return [
            child
            for parent in self._find_parents(segments)
            for child in parent.children_named(segments[-1])
        ]

    def _leaf_paths(
        self, node: ConfigurationNode, path: list[str]
    ) -> Iterator[list[str]]:
        for child in node.children:
            child_path = [*path, child.name or ""]
            if child.is_leaf():
                yield child_path
            else:
                yield from self._leaf_paths(child, child_path)
