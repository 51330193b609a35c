"""Counting, height and balance of binary trees, and rebuilding a tree from two traversals."""

from __future__ import annotations

from collections.abc import Sequence

from algodrills.tree import TreeNode


def count_complete_nodes(root: TreeNode | None) -> int:
    """Node count of a complete binary tree, skipping perfect subtrees by formula."""
    if root is None:
        return 0
    left_depth = 0
    node = root.left
    while node is not None:
        node = node.left
        left_depth += 1
    right_depth = 0
    node = root.right
    while node is not None:
        node = node.right
        right_depth += 1
    if left_depth == right_depth:
        return (2 << left_depth) - 1
    return count_complete_nodes(root.left) + count_complete_nodes(root.right) + 1


def get_height(root: TreeNode | None) -> int:
    """Height of the tree, or -1 when some node's subtrees differ in height by more than one."""
    if root is None:
        return 0
    left = get_height(root.left)
    if left == -1:
        return -1
    right = get_height(root.right)
    if right == -1:
        return -1
    if abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: TreeNode | None) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return get_height(root) != -1


def build_tree(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a binary tree from its in-order and post-order value sequences."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals must have the same length")
    if not inorder:
        return None

    def build(in_lo: int, in_hi: int, post_lo: int, post_hi: int) -> TreeNode | None:
        if post_lo >= post_hi:
            return None
        value = postorder[post_hi - 1]
        try:
            split = inorder.index(value, in_lo, in_hi)
        except ValueError:
            raise ValueError(f"value {value} missing from in-order traversal") from None
        left_size = split - in_lo
        node = TreeNode(value)
        node.left = build(in_lo, split, post_lo, post_lo + left_size)
        node.right = build(split + 1, in_hi, post_lo + left_size, post_hi - 1)
        return node

    return build(0, len(inorder), 0, len(postorder))