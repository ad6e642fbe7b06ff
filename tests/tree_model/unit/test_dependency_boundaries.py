"""Boundary tests for the tree model package."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_tree_model_does_not_import_builders_or_consumers() -> None:
    model_dir = _project_root() / "src" / "schema_node_tree" / "tree_model"
    forbidden_import_fragments = (
        "schema_node_tree.tree_description",
        "schema_node_tree.tree_traversal",
        "schema_node_tree.cli",
        "yaml",
        "click",
    )

    for module_path in sorted(model_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
