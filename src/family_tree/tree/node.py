# src/family_tree/tree/node.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(eq=False)
class TreeNode:
    """
    A single person in a family tree.

    Attributes:
        name: Label identifying the person. Not enforced unique; lookups
            return the first match in pre-order.
        parent: Back-reference to the node that owns this one, or None for
            the root. Used only for upward traversal.
        children: Owned child nodes in declaration order.

    Nodes compare by identity: two people that happen to share a name are
    still different nodes.
    """

    name: str
    parent: Optional["TreeNode"] = field(default=None, repr=False)
    children: List["TreeNode"] = field(default_factory=list, repr=False)

    # ---------- Structure ----------

    def add_child(self, child: "TreeNode") -> None:
        """
        Append ``child`` to this node's children and point it back here.

        ``child`` must not already have a parent; this is not checked.
        """
        self.children.append(child)
        child.parent = self

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def depth(self) -> int:
        """Distance from the root (the root has depth 0)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    # ---------- Traversal ----------

    def iter_subtree(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in pre-order (depth-first)."""
        for node, _ in self.iter_with_depth():
            yield node

    def iter_with_depth(self, depth: int = 0) -> Iterator[Tuple["TreeNode", int]]:
        """
        Yield ``(node, depth)`` pairs for this subtree in pre-order.

        Uses an explicit stack instead of recursion so very deep, narrow
        trees do not run into the interpreter's recursion limit. Children are
        pushed in reverse so they are visited in declaration order.
        """
        stack: List[Tuple[TreeNode, int]] = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node, level
            for child in reversed(node.children):
                stack.append((child, level + 1))

    def find_by_name(self, target_name: str) -> Optional["TreeNode"]:
        """Return the first node in this subtree named ``target_name``, or None."""
        for node in self.iter_subtree():
            if node.name == target_name:
                return node
        return None

    def ancestors(self) -> List["TreeNode"]:
        """
        Return this node's strict ancestors, nearest first and root last.

        The node itself is never included, so the root yields ``[]``.
        """
        chain: List[TreeNode] = []
        current = self.parent
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    # ---------- Presentation ----------

    def render(self, depth: int = 0, indent: str = "  ") -> str:
        """
        Return an indented dump of this subtree, one line per node.

        Each line is ``indent * depth + name`` followed by a newline.
        """
        return "".join(
            f"{indent * level}{node.name}\n"
            for node, level in self.iter_with_depth(depth)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"<TreeNode {self.name!r} parent={parent!r} children={len(self.children)}>"
