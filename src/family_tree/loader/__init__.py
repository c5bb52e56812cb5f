# src/family_tree/loader/__init__.py

"""
Public interface for the tree loader stack.

Intended usage from other parts of the project and tests:

    from family_tree.loader import (
        Declaration,
        TreeBuilder,
        parse_declaration,
        iter_lines,
        build_tree,
        load_tree,
    )
"""

from __future__ import annotations
from .declaration import Declaration, parse_declaration
from .line_source import iter_lines
from .tree_builder import TreeBuilder, build_tree, load_tree
from .file_locator import default_data_dir, list_tree_files, resolve_input_path


__all__ = [
    "Declaration",
    "TreeBuilder",
    "parse_declaration",
    "iter_lines",
    "build_tree",
    "load_tree",
    "default_data_dir",
    "list_tree_files",
    "resolve_input_path",
]
