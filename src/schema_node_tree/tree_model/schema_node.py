"""Named, typed schema tree node with single-level child lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .tree_errors import InvalidChildError, InvalidNodeNameError

logger = logging.getLogger(__name__)


class SchemaNode:
    """One element of a schema tree, such as a field, a type or the schema root.

    The name is fixed at construction. The type descriptor is opaque and
    ``None`` when absent. Children are keyed by their own names; adding a
    child whose name is already taken replaces the previous child and its
    whole subtree without raising.

    Cycles are not detected here. Attaching an ancestor as a child is the
    caller's responsibility; see the tree traversal package for a
    guarded walk.
    """

    def __init__(self, name: str, node_type: Any = None) -> None:
        if not isinstance(name, str):
            raise InvalidNodeNameError(
                f"Schema node name must be a string, got {type(name).__name__}."
            )
        self._name = name
        self._node_type = node_type
        self._children: dict[str, SchemaNode] = {}
        self._children_view: Mapping[str, SchemaNode] = MappingProxyType(self._children)

    @property
    def name(self) -> str:
        return self._name

    @property
    def node_type(self) -> Any:
        """Associated type descriptor, or ``None`` for structural nodes."""
        return self._node_type

    @property
    def children(self) -> Mapping[str, SchemaNode]:
        """Read-only live view of the children keyed by name.

        The view reflects later ``add_child`` calls. Iteration order carries
        no meaning.
        """
        return self._children_view

    def add_child(self, child: SchemaNode) -> None:
        """Attach ``child`` under its name, replacing any existing child of that name."""
        if not isinstance(child, SchemaNode):
            raise InvalidChildError(
                f"Cannot add {type(child).__name__} as a child of schema node "
                f"'{self._name}'; expected SchemaNode."
            )
        previous = self._children.get(child.name)
        if previous is not None and previous is not child:
            logger.debug(
                "Replacing child '%s' of schema node '%s'; previous subtree is dropped.",
                child.name,
                self._name,
            )
        self._children[child.name] = child

    def get_child(self, name: str) -> SchemaNode | None:
        return self._children.get(name)

    def has_child(self, name: str) -> bool:
        return name in self._children

    def __repr__(self) -> str:
        return (
            f"SchemaNode(name={self._name!r}, node_type={self._node_type!r}, "
            f"children={len(self._children)})"
        )
