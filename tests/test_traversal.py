import pytest

from algodrills.traversal import inorder_traversal, postorder_traversal, preorder_traversal
from algodrills.tree import TreeNode, from_level_array, preorder

LEVELS = [5, 1, 4, 0, 0, 3, 6]
BST_LEVELS = [10, 5, 15, 0, 0, 12, 20]


@pytest.mark.parametrize(
    "traverse", [preorder_traversal, inorder_traversal, postorder_traversal]
)
def test_empty_tree(traverse):
    assert traverse(None) == []


@pytest.mark.parametrize(
    "traverse", [preorder_traversal, inorder_traversal, postorder_traversal]
)
def test_single_node(traverse):
    assert traverse(TreeNode(9)) == [9]


def test_preorder_matches_tree_helper():
    root = from_level_array(LEVELS)
    assert preorder_traversal(root) == preorder(root)


def test_preorder_starts_with_root():
    root = from_level_array(LEVELS)
    assert preorder_traversal(root)[0] == root.val


def test_postorder_ends_with_root():
    root = from_level_array(LEVELS)
    assert postorder_traversal(root)[-1] == root.val


def test_inorder_of_search_tree_is_sorted():
    root = from_level_array(BST_LEVELS)
    result = inorder_traversal(root)
    assert result == sorted(value for value in BST_LEVELS if value != 0)


@pytest.mark.parametrize(
    "traverse", [preorder_traversal, inorder_traversal, postorder_traversal]
)
def test_every_node_visited_once(traverse):
    root = from_level_array(LEVELS)
    assert sorted(traverse(root)) == sorted(value for value in LEVELS if value != 0)


def test_left_chain_orders():
    root = TreeNode(3, TreeNode(2, TreeNode(1)))
    assert preorder_traversal(root) == [3, 2, 1]
    assert inorder_traversal(root) == [1, 2, 3]
    assert postorder_traversal(root) == [1, 2, 3]