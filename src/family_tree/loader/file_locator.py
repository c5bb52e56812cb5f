"""
File Locator

Resolves validated paths to family tree text files and lists the candidates
offered when no file is named on the command line.
"""

import os
from pathlib import Path
from typing import List

from family_tree.config import get_config
from family_tree.logging import get_logger
from family_tree.utils import resolve_project_path

log = get_logger(__name__)

TREE_FILE_SUFFIX = ".txt"


def resolve_input_path(path: str | None) -> str | None:
    """
    Convert a user-provided path into an absolute validated file path.

    Returns:
        Absolute path string, or None if no input path was provided.
    """
    if path is None:
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = os.path.abspath(path)
    log.debug(f"Resolving input file: {abs_path}")

    if not os.path.exists(abs_path):
        log.error(f"Input file does not exist: {abs_path}")
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not os.path.isfile(abs_path):
        log.error(f"Input path is not a file: {abs_path}")
        raise IsADirectoryError(f"Input path is not a file: {abs_path}")

    log.debug(f"Validated input file: {abs_path}")
    return abs_path


def default_data_dir() -> Path:
    """
    Directory to browse for tree files: the configured data directory when it
    exists, otherwise the current working directory.
    """
    data_dir = Path(get_config().paths.get("data_dir") or "data")
    if not data_dir.is_absolute():
        data_dir = resolve_project_path(data_dir)

    if data_dir.is_dir():
        return data_dir

    log.debug(f"Data directory {data_dir} missing, falling back to cwd")
    return Path.cwd()


def list_tree_files(directory: Path | None = None) -> List[Path]:
    """Return the ``*.txt`` files directly inside ``directory``, sorted by name."""
    directory = directory if directory is not None else default_data_dir()
    files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() == TREE_FILE_SUFFIX
    )
    log.debug(f"Found {len(files)} tree file(s) in {directory}")
    return files
