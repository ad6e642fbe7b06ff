"""Tree description exports."""

from .description_loader import DescriptionError, build_tree, load_tree_description

__all__ = ["DescriptionError", "build_tree", "load_tree_description"]
