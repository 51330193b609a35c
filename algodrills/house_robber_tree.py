"""House robber on a binary tree: no parent and child may both be robbed."""

from __future__ import annotations

from algodrills.tree import TreeNode


def _best(node: TreeNode | None) -> tuple[int, int]:
    """Best totals for the subtree as (root skipped, root taken)."""
    if node is None:
        return 0, 0
    left_skip, left_take = _best(node.left)
    right_skip, right_take = _best(node.right)
    taken = node.val + left_skip + right_skip
    skipped = max(left_skip, left_take) + max(right_skip, right_take)
    return skipped, taken


def rob_tree(root: TreeNode | None) -> int:
    """Largest sum of node values with no two directly linked nodes chosen."""
    return max(_best(root))