import pytest

from dsakit.tree import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    bst = BinarySearchTree()
    for value in VALUES:
        bst.insert(value)
    return bst


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_preorder_starts_with_root(tree):
    order = tree.preorder()
    assert order[0] == 50
    assert sorted(order) == sorted(VALUES)


def test_postorder_ends_with_root(tree):
    order = tree.postorder()
    assert order[-1] == 50
    assert sorted(order) == sorted(VALUES)


def test_preorder_of_chain_matches_insertion():
    bst = BinarySearchTree()
    for value in [5, 3, 1]:
        bst.insert(value)
    assert bst.preorder() == [5, 3, 1]
    assert bst.postorder() == [1, 3, 5]


def test_duplicate_insert_is_ignored(tree):
    tree.insert(40)
    assert tree.inorder() == sorted(VALUES)


def test_recursive_insert_keeps_duplicates():
    bst = BinarySearchTree()
    for value in [10, 5, 10, 15]:
        bst.insert_recursive(value)
    assert bst.inorder() == [5, 10, 10, 15]


def test_recursive_and_iterative_agree_without_duplicates():
    a, b = BinarySearchTree(), BinarySearchTree()
    for value in VALUES:
        a.insert(value)
        b.insert_recursive(value)
    assert a.preorder() == b.preorder()


def test_height_of_balanced_tree(tree):
    assert tree.height() == 3


def test_height_of_chain_equals_size():
    bst = BinarySearchTree()
    values = [1, 2, 3, 4, 5]
    for value in values:
        bst.insert(value)
    assert bst.height() == len(values)


def test_empty_tree_height_and_counts():
    bst = BinarySearchTree()
    assert bst.height() == 0
    assert bst.left_side_count() == 0
    assert bst.right_side_count() == 0
    assert bst.common_parent_nodes() == 0
    assert bst.parent_of(1) is None


def test_maximum_and_minimum(tree):
    assert tree.maximum() == max(VALUES)
    assert tree.minimum() == min(VALUES)


@pytest.mark.parametrize("method", ["maximum", "minimum"])
def test_extremes_of_empty_tree_raise(method):
    with pytest.raises(ValueError):
        getattr(BinarySearchTree(), method)()


def test_common_parent_nodes_full_tree(tree):
    assert tree.common_parent_nodes() == len(VALUES) - 1


def test_common_parent_nodes_chain_is_zero():
    bst = BinarySearchTree()
    for value in [1, 2, 3]:
        bst.insert(value)
    assert bst.common_parent_nodes() == 0


def test_side_counts_cover_all_but_root(tree):
    assert tree.left_side_count() + tree.right_side_count() + 1 == len(tree)
    assert tree.left_side_count() == tree.right_side_count()


def test_side_counts_of_right_chain():
    bst = BinarySearchTree()
    values = [1, 2, 3, 4]
    for value in values:
        bst.insert(value)
    assert bst.left_side_count() == 0
    assert bst.right_side_count() == len(values) - 1


@pytest.mark.parametrize(
    "child, parent", [(30, 50), (70, 50), (20, 30), (40, 30), (60, 70), (80, 70)]
)
def test_parent_of(tree, child, parent):
    assert tree.parent_of(child) == parent


def test_parent_of_root_and_missing(tree):
    assert tree.parent_of(50) is None
    assert tree.parent_of(99) is None