"""In-memory schema tree of named, typed nodes."""

import logging

from .tree_model import (
    InvalidChildError,
    InvalidNodeNameError,
    SchemaNode,
    SchemaTreeError,
    TreeCycleError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidChildError",
    "InvalidNodeNameError",
    "SchemaNode",
    "SchemaTreeError",
    "TreeCycleError",
]
