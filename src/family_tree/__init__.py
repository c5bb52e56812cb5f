"""
family_tree: build a family tree from ``PARENT:CHILD,...`` lines and find the
most recent common ancestor of two people.

    from family_tree import build_tree, most_recent_common_ancestor

    tree = build_tree(["A:B,C", "B:D,E", "C:F"])
    most_recent_common_ancestor(tree, "D", "F").name  # "A"
"""

from family_tree.core.exceptions import (
    MalformedLineError,
    NodeNotFoundError,
    ParentNotFoundError,
    RootAlreadySetError,
    TreeBuildError,
    TreeError,
)
from family_tree.loader import TreeBuilder, build_tree, load_tree
from family_tree.query import find_mrca_name, most_recent_common_ancestor
from family_tree.tree import FamilyTree, TreeNode

__version__ = "0.1.0"

__all__ = [
    "FamilyTree",
    "TreeNode",
    "TreeBuilder",
    "build_tree",
    "load_tree",
    "most_recent_common_ancestor",
    "find_mrca_name",
    "TreeError",
    "TreeBuildError",
    "MalformedLineError",
    "ParentNotFoundError",
    "RootAlreadySetError",
    "NodeNotFoundError",
]
