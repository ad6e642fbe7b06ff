"""Schema tree error types."""

from __future__ import annotations


class SchemaTreeError(Exception):
    """Base class for schema tree contract violations."""


class InvalidNodeNameError(SchemaTreeError):
    """Raised when a schema node is constructed with a non-string name."""


class InvalidChildError(SchemaTreeError):
    """Raised when something other than a schema node is added as a child."""


class TreeCycleError(SchemaTreeError):
    """Raised when a traversal reaches a node already on the current branch."""
