"""
In-memory family tree structure.

    from family_tree.tree import FamilyTree, TreeNode
"""

from __future__ import annotations

from .node import TreeNode
from .family_tree import FamilyTree

__all__ = [
    "FamilyTree",
    "TreeNode",
]
