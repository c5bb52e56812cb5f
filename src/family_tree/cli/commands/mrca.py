
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import choose_tree_file, console, emit, reported_errors, tree_text
from family_tree.config import get_config
from family_tree.core.context import QueryContext
from family_tree.core.pipeline import Pipeline
from family_tree.logging import get_logger

log = get_logger(__name__)


def mrca_command(
    tree_file: Optional[Path] = typer.Argument(
        None, help="Family tree text file (prompted for when omitted)"
    ),
    name1: Optional[str] = typer.Argument(None, help="First person"),
    name2: Optional[str] = typer.Argument(None, help="Second person"),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the answer, not the tree",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Find the most recent common ancestor of two people.

    With no names the configured defaults (Bilbo and Frodo) are used.
    """
    if (name1 is None) != (name2 is None):
        raise typer.BadParameter("give both names or neither")

    cfg = get_config()

    with reported_errors():
        if tree_file is None:
            tree_file = choose_tree_file()

        ctx = QueryContext(
            config=cfg,
            logger=log,
            input_path=str(tree_file),
            names=(name1, name2) if name1 is not None else None,
            debug=cfg.debug,
        )
        result = Pipeline(ctx).run()

    if verbose:
        console.log(f"Tree has {ctx.stats.get('nodes', 0)} node(s)")

    if not quiet:
        emit("Tree:\n" + tree_text(result.tree) + "\n**************\n")
    emit(result.describe())
