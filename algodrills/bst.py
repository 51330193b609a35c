"""Binary search tree validation."""

from __future__ import annotations

from algodrills.traversal import inorder_traversal
from algodrills.tree import TreeNode


def is_valid_bst(root: TreeNode | None) -> bool:
    """Whether the in-order values never decrease; equal neighbours are allowed."""
    values = inorder_traversal(root)
    return all(previous <= current for previous, current in zip(values, values[1:]))