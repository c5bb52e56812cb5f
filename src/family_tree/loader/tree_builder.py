# src/family_tree/loader/tree_builder.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from family_tree.core.exceptions import ParentNotFoundError
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree, TreeNode

from .declaration import Declaration, parse_declaration
from .line_source import iter_lines

log = get_logger(__name__)


class TreeBuilder:
    """
    Applies declaration lines, in order, to a FamilyTree.

    The first line's parent label becomes the root. Every later parent label
    is looked up in the tree built so far (first pre-order match wins), so a
    name may be re-declared on a later line to give it more children. Each
    child label always produces a brand new node.

    Errors abort immediately and nothing is rolled back: nodes attached by
    earlier lines stay in ``builder.tree``.
    """

    def __init__(self, tree: Optional[FamilyTree] = None):
        self._tree = tree if tree is not None else FamilyTree()
        self.lines_applied = 0

    @property
    def tree(self) -> FamilyTree:
        return self._tree

    def _resolve_parent(self, decl: Declaration) -> TreeNode:
        if self._tree.is_empty:
            return self._tree.install_root(decl.parent)

        parent = self._tree.find_by_name(decl.parent)
        if parent is None:
            log.error(f"Line {decl.lineno}: parent {decl.parent!r} not found")
            raise ParentNotFoundError(decl.parent, decl.raw, decl.lineno)
        return parent

    def add_declaration(self, decl: Declaration) -> TreeNode:
        """Attach the declaration's children; return the resolved parent."""
        parent = self._resolve_parent(decl)
        for label in decl.children:
            self._tree.attach_child(parent, self._tree.create_node(label))

        self.lines_applied += 1
        log.debug(f"Line {decl.lineno}: {decl.parent!r} <- {list(decl.children)!r}")
        return parent

    def add_line(self, line: str, lineno: int = 0) -> TreeNode:
        """Parse and apply one ``PARENT:CHILD1,CHILD2,...`` line."""
        decl = parse_declaration(
            line, lineno=lineno, first_line=self._tree.is_empty
        )
        return self.add_declaration(decl)

    def add_lines(self, lines: Iterable[str]) -> FamilyTree:
        """
        Apply every line in order (line numbers start at 1).

        If ``lines`` is a generator it is closed before an error propagates,
        so a file-backed line source releases its handle right away.
        """
        iterator = iter(lines)
        try:
            for lineno, line in enumerate(iterator, start=1):
                self.add_line(line, lineno=lineno)
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()

        log.info(
            f"Applied {self.lines_applied} declaration line(s); "
            f"tree has {self._tree.node_count()} node(s)"
        )
        return self._tree


def build_tree(lines: Iterable[str]) -> FamilyTree:
    """
    Build a FamilyTree from a sequence of declaration lines.

        lines -> TreeBuilder -> FamilyTree(root=TreeNode(...))
    """
    return TreeBuilder().add_lines(lines)


def load_tree(path: Union[str, Path], encoding: Optional[str] = None) -> FamilyTree:
    """Build a FamilyTree straight from a tree file on disk."""
    log.info(f"Loading family tree: {path}")
    return build_tree(iter_lines(path, encoding=encoding))
