from algodrills.tree import TreeNode, from_level_array, preorder


def test_empty_array_gives_no_tree():
    assert from_level_array([]) is None


def test_zero_root_gives_no_tree():
    assert from_level_array([0, 1, 2]) is None


def test_small_tree_structure():
    root = from_level_array([2, 1, 3])
    assert root.val == 2
    assert root.left.val == 1
    assert root.right.val == 3
    assert preorder(root) == [2, 1, 3]


def test_tree_with_gaps():
    root = from_level_array([5, 1, 4, 0, 0, 3, 6])
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 3
    assert root.right.right.val == 6
    assert preorder(root) == [5, 1, 4, 3, 6]


def test_children_of_empty_slot_are_unreachable():
    root = from_level_array([1, 0, 2, 3])
    assert preorder(root) == [1, 2]


def test_full_array_preorder_contains_every_value():
    values = [8, 4, 12, 2, 6, 10, 14]
    assert sorted(preorder(from_level_array(values))) == sorted(values)


def test_preorder_of_none():
    assert preorder(None) == []


def test_manual_tree_equals_built_tree():
    built = from_level_array([2, 1, 3])
    assert built == TreeNode(2, TreeNode(1), TreeNode(3))