"""Deterministic walking and flattening of schema trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from schema_node_tree.tree_model import SchemaNode, TreeCycleError

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class FlattenedNode:
    """Leaf of a schema tree addressed by its dotted path."""

    path: str
    node_type: Any


def iter_nodes(root: SchemaNode) -> Iterator[tuple[tuple[str, ...], SchemaNode]]:
    """Yield ``(path, node)`` for every descendant of ``root``, depth first.

    Siblings are visited in sorted name order. A node reachable from two
    different branches is yielded once per branch; a node that reappears on
    its own branch raises ``TreeCycleError``. Depth is bounded only by memory.
    """
    on_branch = {id(root)}
    stack: list[_Frame] = [_Frame.open(path=(), node=root)]
    while stack:
        frame = stack[-1]
        name = next(frame.pending_names, None)
        if name is None:
            stack.pop()
            on_branch.discard(id(frame.node))
            continue
        child = frame.node.children[name]
        child_path = (*frame.path, name)
        if id(child) in on_branch:
            raise TreeCycleError(
                f"Cycle detected at '{PATH_SEPARATOR.join(child_path)}': "
                f"schema node '{child.name}' is its own ancestor."
            )
        yield child_path, child
        on_branch.add(id(child))
        stack.append(_Frame.open(path=child_path, node=child))


@dataclass
class _Frame:
    """One node on the current branch with its not yet visited child names."""

    path: tuple[str, ...]
    node: SchemaNode
    pending_names: Iterator[str]

    @classmethod
    def open(cls, *, path: tuple[str, ...], node: SchemaNode) -> _Frame:
        return cls(path=path, node=node, pending_names=iter(sorted(node.children)))


def flatten_tree(root: SchemaNode) -> list[FlattenedNode]:
    """Return the leaves below ``root`` with their dotted paths."""
    return [
        FlattenedNode(path=PATH_SEPARATOR.join(path), node_type=node.node_type)
        for path, node in iter_nodes(root)
        if not node.children
    ]


def find_node(root: SchemaNode, path: str) -> SchemaNode | None:
    """Resolve a dotted path one level at a time; ``""`` resolves to ``root``.

    Segments are split on ``.``, so children whose names contain a dot are not
    addressable here, and a child named ``""`` is only reachable below the
    root level (``"a."``). Use ``get_child`` directly for such names.
    """
    if not path:
        return root
    current: SchemaNode | None = root
    for segment in path.split(PATH_SEPARATOR):
        if current is None:
            return None
        current = current.get_child(segment)
    return current
