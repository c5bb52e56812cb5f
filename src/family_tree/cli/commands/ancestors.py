
from __future__ import annotations

from pathlib import Path

import typer

from family_tree.cli.utils import emit, load_family_tree, reported_errors
from family_tree.core.exceptions import NodeNotFoundError


def ancestors_command(
    tree_file: Path = typer.Argument(..., help="Family tree text file"),
    name: str = typer.Argument(..., help="Person whose ancestors to list"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    List a person's ancestors, nearest first.
    """
    with reported_errors():
        tree = load_family_tree(tree_file, verbose=verbose)
        node = tree.find_by_name(name)
        if node is None:
            raise NodeNotFoundError(name)

    chain = tree.ancestor_chain(node)
    if not chain:
        emit(f"{name} has no ancestors in this tree")
        return

    emit(f"Ancestors of {name}: " + " -> ".join(n.name for n in chain))
