# src/family_tree/loader/declaration.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from family_tree.core.exceptions import MalformedLineError

SEPARATOR = ":"
CHILD_DELIMITER = ","


@dataclass(frozen=True)
class Declaration:
    """
    One parsed declaration line: a parent label and its children.

    Attributes:
        lineno: 1-based line number in the original file (0 if unknown).
        parent: Parent label, exactly as written before the first colon.
        children: Trimmed child labels, in the order they were listed.
            Empty labels (e.g. from a trailing comma) are kept as "".
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    parent: str
    children: Tuple[str, ...]
    raw: str


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def parse_declaration(
    line: str, lineno: int = 0, first_line: bool = False
) -> Declaration:
    """
    Parse a single ``PARENT:CHILD1,CHILD2,...`` line into a Declaration.

    Rules:
        - The line is split at the FIRST colon; a missing colon is an error.
        - The parent label is not trimmed.
        - The child list is split on every comma (no escaping) and each
          child label is trimmed.
        - When ``first_line`` is set, one leading UTF-8 BOM is dropped.

    Examples:
        "A:B,C"        -> parent "A", children ("B", "C")
        "A: B , C"     -> parent "A", children ("B", "C")
        "A:B,"         -> parent "A", children ("B", "")
        "A:B:C"        -> parent "A", children ("B:C",)
    """
    raw = _strip_eol(line)

    if first_line:
        raw = raw.removeprefix("\ufeff")

    parent, sep, child_list = raw.partition(SEPARATOR)
    if not sep:
        raise MalformedLineError(raw, lineno)

    children = tuple(label.strip() for label in child_list.split(CHILD_DELIMITER))

    return Declaration(
        lineno=lineno,
        parent=parent,
        children=children,
        raw=raw,
    )
