"""Schema tree model exports."""

from .schema_node import SchemaNode
from .tree_errors import InvalidChildError, InvalidNodeNameError, SchemaTreeError, TreeCycleError

__all__ = [
    "InvalidChildError",
    "InvalidNodeNameError",
    "SchemaNode",
    "SchemaTreeError",
    "TreeCycleError",
]
