"""Root-to-leaf paths, left leaves and path sums in binary trees."""

from __future__ import annotations

from collections import deque

from algodrills.tree import TreeNode


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def all_paths(root: TreeNode | None) -> list[list[int]]:
    """Every root-to-leaf path as a list of values, leftmost path first."""
    result: list[list[int]] = []
    stack: list[tuple[TreeNode, list[int]]] = [(root, [root.val])] if root is not None else []
    while stack:
        node, path = stack.pop()
        if _is_leaf(node):
            result.append(path)
            continue
        if node.right is not None:
            stack.append((node.right, path + [node.right.val]))
        if node.left is not None:
            stack.append((node.left, path + [node.left.val]))
    return result


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Sum of the values of leaves that are the left child of their parent."""
    total = 0
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, is_left = stack.pop()
        if _is_leaf(node):
            if is_left:
                total += node.val
            continue
        if node.left is not None:
            stack.append((node.left, True))
        if node.right is not None:
            stack.append((node.right, False))
    return total


def find_bottom_left_value(root: TreeNode | None) -> int:
    """Value of the leftmost node on the deepest level of the tree.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no bottom-left value")
    queue = deque([root])
    leftmost = root.val
    while queue:
        leftmost = queue[0].val
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return leftmost


def has_path_sum(root: TreeNode | None, target: int) -> bool:
    """Whether some root-to-leaf path has values summing to ``target``."""
    stack: list[tuple[TreeNode, int]] = [(root, target - root.val)] if root is not None else []
    while stack:
        node, remaining = stack.pop()
        if _is_leaf(node):
            if remaining == 0:
                return True
            continue
        if node.right is not None:
            stack.append((node.right, remaining - node.right.val))
        if node.left is not None:
            stack.append((node.left, remaining - node.left.val))
    return False