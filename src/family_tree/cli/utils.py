
from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console

from family_tree.config import get_config
from family_tree.core.exceptions import PipelineError, TreeError
from family_tree.loader import default_data_dir, list_tree_files, load_tree, resolve_input_path
from family_tree.tree import FamilyTree

console = Console()


def emit(text: str) -> None:
    """Print plain text; names are never treated as Rich markup."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def tree_text(tree: FamilyTree) -> str:
    """The tree under its header, indented as configured."""
    return tree.to_text(get_config().render.get("indent", "  "))


@contextmanager
def reported_errors() -> Iterator[None]:
    """
    Turn load/query failures into a one-line message and exit code 1.

    I/O, tree and configuration problems each get their own prefix.
    """
    try:
        yield
    except OSError as exc:
        emit(f"IO trouble: {exc}")
        raise typer.Exit(code=1) from exc
    except TreeError as exc:
        emit(f"Input file trouble: {exc}")
        raise typer.Exit(code=1) from exc
    except PipelineError as exc:
        emit(f"Configuration trouble: {exc}")
        raise typer.Exit(code=1) from exc


def choose_tree_file(directory: Optional[Path] = None) -> Path:
    """
    Ask the user to pick one of the ``*.txt`` files in the data directory.
    """
    directory = directory if directory is not None else default_data_dir()
    candidates = list_tree_files(directory)
    if not candidates:
        emit(f"No family tree text files found in {directory}")
        raise typer.Exit(code=1)

    for index, path in enumerate(candidates, start=1):
        emit(f"{index}. {path.name}")

    choice = typer.prompt("Select a family tree file", type=int)
    if not 1 <= choice <= len(candidates):
        emit(f"No file numbered {choice}")
        raise typer.Exit(code=1)
    return candidates[choice - 1]


def load_family_tree(path: Optional[Path], *, verbose: bool = False) -> FamilyTree:
    """
    Resolve (or interactively choose) the tree file and build the tree.
    """
    if path is None:
        path = choose_tree_file()

    t0 = time.perf_counter()

    tree = load_tree(resolve_input_path(str(path)))

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {tree.node_count()} node(s) in {elapsed:.3f}s")

    return tree
