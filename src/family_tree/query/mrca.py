# src/family_tree/query/mrca.py

"""
Most recent common ancestor (MRCA) queries.

Ancestors are strict: a node is never its own ancestor. Given the lines
``A:B`` and ``B:C`` the MRCA of C and B is therefore A, not B.
"""

from __future__ import annotations

from typing import Optional

from family_tree.core.exceptions import NodeNotFoundError
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree, TreeNode

log = get_logger(__name__)


def _require(tree: FamilyTree, name: str) -> TreeNode:
    node = tree.find_by_name(name)
    if node is None:
        log.error(f"Query name not found: {name!r}")
        raise NodeNotFoundError(name)
    return node


def most_recent_common_ancestor(
    tree: FamilyTree, name1: str, name2: str
) -> Optional[TreeNode]:
    """
    Return the deepest node that is a strict ancestor of both named nodes.

    The ancestor chain of ``name1`` is scanned nearest-first and the first
    node that also appears (by identity) in the chain of ``name2`` wins.

    Raises:
        NodeNotFoundError: if either name is not in the tree (``name1`` is
            checked first).

    Returns:
        The ancestor node, or None when the chains share nothing (only
        possible for nodes that do not hang off the same root).
    """
    node1 = _require(tree, name1)
    node2 = _require(tree, name2)

    ancestors2 = {id(n) for n in tree.ancestor_chain(node2)}
    for candidate in tree.ancestor_chain(node1):
        if id(candidate) in ancestors2:
            log.debug(f"MRCA of {name1!r} and {name2!r} is {candidate.name!r}")
            return candidate

    log.debug(f"No common ancestor for {name1!r} and {name2!r}")
    return None


def find_mrca_name(tree: FamilyTree, name1: str, name2: str) -> Optional[str]:
    """Name of the most recent common ancestor, or None."""
    node = most_recent_common_ancestor(tree, name1, name2)
    return node.name if node is not None else None
