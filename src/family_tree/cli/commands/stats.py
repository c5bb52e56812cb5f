
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from family_tree.cli.utils import load_family_tree, reported_errors

console = Console()


def stats_command(
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
    Show summary statistics for a family tree file.
    """
    with reported_errors():
        tree = load_family_tree(tree_file, verbose=verbose)

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Root", tree.root.name if tree.root is not None else "-")
    table.add_row("People", str(tree.node_count()))
    table.add_row("Leaves", str(len(tree.leaves())))
    table.add_row("Generations", str(tree.height() + 1))

    console.print(table)
