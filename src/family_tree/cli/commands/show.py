
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import emit, load_family_tree, reported_errors, tree_text


def show_command(
    tree_file: Optional[Path] = typer.Argument(
        None, help="Family tree text file (prompted for when omitted)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the indented family tree.
    """
    with reported_errors():
        tree = load_family_tree(tree_file, verbose=verbose)

    emit(tree_text(tree))
