import pytest

from puzzlebox.trees import (
    TreeNode,
    height,
    inorder,
    is_valid_bst,
    longest_consecutive,
    min_cost_equal_branches,
    mirror,
    recover_bst,
)


def weighted_tree():
    n4 = TreeNode(4, TreeNode(8), TreeNode(9), left_cost=1, right_cost=3)
    n2 = TreeNode(2, n4, TreeNode(5), left_cost=2, right_cost=2)
    n3 = TreeNode(3, TreeNode(6), TreeNode(7), left_cost=4, right_cost=2)
    return TreeNode(1, n2, n3, left_cost=1, right_cost=2)


def swapped_bst():
    return TreeNode(
        6,
        TreeNode(10, TreeNode(1), TreeNode(3)),
        TreeNode(2, TreeNode(7), TreeNode(12)),
    )


def small_tree():
    return TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))


def test_min_cost_source_example():
    assert min_cost_equal_branches(weighted_tree()) == 7


@pytest.mark.parametrize("root", [None, TreeNode(1)])
def test_min_cost_trivial(root):
    assert min_cost_equal_branches(root) == 0


def test_min_cost_single_child_stops_at_edge():
    child = TreeNode(2, TreeNode(3), TreeNode(4), left_cost=1, right_cost=4)
    root = TreeNode(1, right=child, right_cost=5)
    assert min_cost_equal_branches(root) == 0


def test_recover_bst_far_apart():
    root = swapped_bst()
    before = inorder(root)
    assert before != sorted(before)
    recover_bst(root)
    assert inorder(root) == sorted(before)
    assert is_valid_bst(root)


def test_recover_bst_adjacent():
    root = TreeNode(1, TreeNode(2))
    recover_bst(root)
    assert inorder(root) == [1, 2]
    assert root.value == 2


def test_recover_bst_leaves_valid_tree():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert inorder(recover_bst(root)) == [1, 2, 3]


def test_inorder_empty():
    assert inorder(None) == []


def test_height():
    assert height(small_tree()) == 3
    assert height(None) == 0
    assert height(TreeNode(7)) == 1


def test_is_valid_bst():
    root = TreeNode(3, TreeNode(2, TreeNode(1), TreeNode(4)), TreeNode(5))
    assert is_valid_bst(root) is False
    assert is_valid_bst(TreeNode(2, TreeNode(1), TreeNode(3))) is True
    assert is_valid_bst(None) is True
    assert is_valid_bst(TreeNode(2, TreeNode(2))) is False


def test_longest_consecutive_source_example():
    root = TreeNode(6, right=TreeNode(9, TreeNode(7), TreeNode(10, right=TreeNode(11))))
    assert longest_consecutive(root) == 3


def test_longest_consecutive_edges():
    assert longest_consecutive(None) == 0
    assert longest_consecutive(TreeNode(5)) == 1


def test_mirror_reverses_inorder():
    root = small_tree()
    before = inorder(root)
    assert inorder(mirror(root)) == before[::-1]


def test_mirror_twice_restores():
    root = small_tree()
    before = inorder(root)
    mirror(mirror(root))
    assert inorder(root) == before
    assert mirror(None) is None