# src/family_tree/loader/line_source.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Union

from family_tree.config import get_config
from family_tree.logging import get_logger

log = get_logger(__name__)


def iter_lines(path: Union[str, Path], encoding: Optional[str] = None) -> Iterator[str]:
    """
    Lazily yield the lines of a tree file without their line terminators.

    The file stays open only while the generator is being consumed and is
    closed on exhaustion, when the consumer raises mid-iteration and closes
    the generator, or when the generator is garbage collected.

    Args:
        path: Path to the tree file.
        encoding: Text encoding; defaults to ``loader.encoding`` from config.

    Raises:
        FileNotFoundError: if ``path`` does not exist (on first ``next()``).
        OSError: for any other problem opening or reading the file.
    """
    file_path = Path(path)
    encoding = encoding or get_config().loader.get("encoding", "utf-8")

    log.debug(f"Opening tree file: {file_path}")
    with file_path.open("r", encoding=encoding, newline="") as f:
        for raw_line in f:
            yield raw_line.rstrip("\r\n")
    log.debug(f"Closed tree file: {file_path}")
