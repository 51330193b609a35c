"""Iterative pre-, in- and post-order traversals of binary trees."""

from __future__ import annotations

from algodrills.tree import TreeNode


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in root-left-right order, using an explicit stack."""
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


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left-root-right order, using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.val)
            current = current.right
    return result


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left-right-root order.

    Collects root-right-left order with a stack and reverses it.
    """
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result