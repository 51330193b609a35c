"""Level-order listing, mirroring and maximum-tree construction for binary trees."""

from __future__ import annotations

from collections.abc import Sequence

from algodrills.tree import TreeNode


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by level, top to bottom and left to right.

    An empty tree reports a single level holding 0, the placeholder for an empty slot.
    """
    if root is None:
        return [[0]]
    result: list[list[int]] = []
    level = [root]
    while level:
        result.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Swap the children of every node in place and return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def construct_maximum_binary_tree(nums: Sequence[int]) -> TreeNode | None:
    """Tree rooted at the largest value, built recursively from the parts left and right of it.

    Among equal maxima the first one is chosen.
    """
    values = list(nums)

    def build(low: int, high: int) -> TreeNode | None:
        if low >= high:
            return None
        split = max(range(low, high), key=values.__getitem__)
        node = TreeNode(values[split])
        node.left = build(low, split)
        node.right = build(split + 1, high)
        return node

    return build(0, len(values))