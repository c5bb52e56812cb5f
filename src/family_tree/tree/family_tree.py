# src/family_tree/tree/family_tree.py

from __future__ import annotations

from typing import Iterator, List, Optional

from family_tree.core.exceptions import RootAlreadySetError
from family_tree.logging import get_logger
from .node import TreeNode

log = get_logger(__name__)

HEADER = "Family Tree:\n\n"


class FamilyTree:
    """
    Holder for the single root of a family tree plus the tree-level API.

    A tree is built once (see ``family_tree.loader.TreeBuilder``) and read
    many times. The root is installed exactly once and never replaced.
    """

    def __init__(self, root: Optional[TreeNode] = None):
        self._root = root

    # ------------------------------------------------------------------ #
    # Construction primitives
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @staticmethod
    def create_node(name: str) -> TreeNode:
        """Allocate a detached node with no parent and no children."""
        return TreeNode(name=name)

    @staticmethod
    def attach_child(parent: TreeNode, child: TreeNode) -> None:
        """Attach a freshly created ``child`` under ``parent``."""
        parent.add_child(child)

    def install_root(self, name: str) -> TreeNode:
        """Create the root node. Only allowed while the tree is empty."""
        if self._root is not None:
            raise RootAlreadySetError(self._root.name, name)
        self._root = self.create_node(name)
        log.debug("Installed root %r", name)
        return self._root

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find_by_name(
        self, target_name: str, start: Optional[TreeNode] = None
    ) -> Optional[TreeNode]:
        """
        Pre-order search for ``target_name``, starting at ``start`` (default:
        the root). Returns the first match or None; None on an empty tree.
        """
        node = start if start is not None else self._root
        if node is None:
            return None
        found = node.find_by_name(target_name)
        if found is None:
            log.debug("No node named %r below %r", target_name, node.name)
        return found

    @staticmethod
    def ancestor_chain(node: TreeNode) -> List[TreeNode]:
        """Strict ancestors of ``node``, nearest first, root last."""
        return node.ancestors()

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Every node in the tree, pre-order."""
        if self._root is None:
            return iter(())
        return self._root.iter_subtree()

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def leaves(self) -> List[TreeNode]:
        return [node for node in self.iter_nodes() if node.is_leaf]

    def height(self) -> int:
        """Largest node depth; 0 for a lone root, -1 for an empty tree."""
        if self._root is None:
            return -1
        return max(level for _, level in self._root.iter_with_depth())

    # ------------------------------------------------------------------ #
    # Presentation
    # ------------------------------------------------------------------ #

    def render(
        self, node: Optional[TreeNode] = None, depth: int = 0, indent: str = "  "
    ) -> str:
        """Indented dump of the subtree at ``node`` (default: the whole tree)."""
        node = node if node is not None else self._root
        if node is None:
            return ""
        return node.render(depth=depth, indent=indent)

    def to_text(self, indent: str = "  ") -> str:
        """The whole tree under a ``Family Tree:`` header."""
        return HEADER + self.render(indent=indent)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        root = self._root.name if self._root is not None else None
        return f"<FamilyTree root={root!r}>"
