"""Binary tree nodes and their construction from level-order arrays."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an integer."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_array(values: Sequence[int]) -> TreeNode | None:
    """Build a tree from a heap-ordered array where 0 marks an empty slot.

    The children of slot ``i`` sit at ``2i+1`` and ``2i+2``.
    """
    nodes = [TreeNode(value) if value != 0 else None for value in values]
    for index, node in enumerate(nodes):
        if node is None:
            continue
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0] if nodes else None


def preorder(root: TreeNode | None) -> list[int]:
    """Values of the tree in root-left-right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result