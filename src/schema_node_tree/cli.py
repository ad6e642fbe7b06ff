"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click

from schema_node_tree.tree_description import DescriptionError, load_tree_description
from schema_node_tree.tree_model import SchemaTreeError
from schema_node_tree.tree_traversal import find_node, flatten_tree

_MISSING_TYPE = "-"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-node-tree")
@click.option("--verbose", is_flag=True, default=False, help="Log tree building details.")
def cli(verbose: bool) -> None:
    """Schema tree inspection utility."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="paths")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON tree description",
)
def list_paths(input_path: str) -> None:
    """Print every leaf path of the described schema tree with its type."""
    try:
        root = load_tree_description(input_path)
        leaves = flatten_tree(root)
    except (DescriptionError, SchemaTreeError, OSError) as exc:
        raise CliError(str(exc)) from exc
    for leaf in leaves:
        click.echo(f"{leaf.path}\t{_format_type(leaf.node_type)}")


@cli.command(name="lookup")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON tree description",
)
@click.option(
    "--path",
    "node_path",
    required=True,
    help="Dotted path of the node below the root",
)
def lookup(input_path: str, node_path: str) -> None:
    """Print the type of the node at a dotted path."""
    try:
        root = load_tree_description(input_path)
    except (DescriptionError, OSError) as exc:
        raise CliError(str(exc)) from exc
    node = find_node(root, node_path)
    if node is None:
        raise CliError(f"No schema node at path '{node_path}' under '{root.name}'.")
    click.echo(_format_type(node.node_type))


def _format_type(node_type: Any) -> str:
    return _MISSING_TYPE if node_type is None else str(node_type)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
