"""Module entry point for `python -m schema_node_tree`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
