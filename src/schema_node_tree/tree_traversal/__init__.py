"""Schema tree traversal exports."""

from .tree_walker import PATH_SEPARATOR, FlattenedNode, find_node, flatten_tree, iter_nodes

__all__ = [
    "PATH_SEPARATOR",
    "FlattenedNode",
    "find_node",
    "flatten_tree",
    "iter_nodes",
]
