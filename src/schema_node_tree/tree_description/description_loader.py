"""Build schema trees from nested YAML/JSON tree descriptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_node_tree.tree_model import SchemaNode

logger = logging.getLogger(__name__)


class DescriptionError(Exception):
    """Raised when a tree description is missing or malformed."""


def load_tree_description(description_path: Path | str) -> SchemaNode:
    """Load a tree description file and build its schema tree.

    Args:
      description_path: YAML or JSON file holding the root description.

    Returns:
      The root schema node.

    Raises:
      DescriptionError: If the file is missing, unparsable or malformed.
    """
    path = Path(description_path)
    if not path.exists():
        raise DescriptionError(f"Tree description file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DescriptionError(f"Tree description is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptionError(f"Failed to parse tree description: {exc}") from exc

    return build_tree(parsed)


def build_tree(description: Any) -> SchemaNode:
    """Build a schema tree from an already parsed root description."""
    if not isinstance(description, Mapping):
        raise DescriptionError("Tree description root must be a mapping.")
    return _build_node(description, location="root", on_branch={id(description)})


def _build_node(
    description: Mapping[str, Any], *, location: str, on_branch: set[int]
) -> SchemaNode:
    name = _require_string(description.get("name"), f"{location}.name")
    node = SchemaNode(name, description.get("type"))

    for index, child_description in enumerate(_children_sequence(description, location)):
        child_location = f"{location}.children[{index}]"
        child_mapping = _require_mapping(child_description, child_location)
        if id(child_mapping) in on_branch:
            raise DescriptionError(f"{child_location} refers back to an enclosing description.")
        on_branch.add(id(child_mapping))
        try:
            child = _build_node(child_mapping, location=child_location, on_branch=on_branch)
        finally:
            on_branch.discard(id(child_mapping))
        if node.has_child(child.name):
            logger.warning(
                "%s repeats child name '%s' under '%s'; the later entry wins.",
                child_location,
                child.name,
                node.name,
            )
        node.add_child(child)
    return node


def _children_sequence(description: Mapping[str, Any], location: str) -> Sequence[Any]:
    children = description.get("children")
    if children is None:
        return ()
    if isinstance(children, str) or not isinstance(children, Sequence):
        raise DescriptionError(f"{location}.children must be a list of descriptions.")
    return children


def _require_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DescriptionError(f"{location} must be a mapping.")
    return value


def _require_string(value: Any, location: str) -> str:
    if not isinstance(value, str):
        raise DescriptionError(f"{location} must be a string.")
    return value
