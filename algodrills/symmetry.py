"""Mirror symmetry and depth of binary trees."""

from __future__ import annotations

from algodrills.tree import TreeNode


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pairs: list[tuple[TreeNode | None, TreeNode | None]] = [(root.left, root.right)]
    while pairs:
        left, right = pairs.pop()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pairs.append((left.left, right.right))
        pairs.append((left.right, right.left))
    return True


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth