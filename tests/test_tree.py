import pytest

from algonotes.tree import BST, BinaryTree, TreeNode

VALUES = [10, 5, 20, 3, 4, 1, 7, 25, 15, 21, 42, 22]


@pytest.fixture
def tree():
    bst = BST()
    for value in VALUES:
        bst.insert(value)
    return bst


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_worked_example_after_remove(tree):
    tree.remove(20)
    assert tree.inorder() == sorted(v for v in VALUES if v != 20)
    assert tree.preorder() == [10, 5, 3, 1, 4, 7, 21, 15, 25, 22, 42]


def test_traversals_leave_tree_intact(tree):
    first = (tree.inorder(), tree.preorder(), tree.postorder(), tree.level_order())
    second = (tree.inorder(), tree.preorder(), tree.postorder(), tree.level_order())
    assert first == second


def test_traversal_endpoints(tree):
    assert tree.preorder()[0] == 10
    assert tree.postorder()[-1] == 10
    assert tree.level_order()[0] == 10
    assert sorted(tree.postorder()) == sorted(VALUES)
    assert sorted(tree.level_order()) == sorted(VALUES)


def test_small_manual_tree():
    root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3))
    t = BinaryTree(root)
    assert t.inorder() == [4, 2, 1, 3]
    assert t.preorder() == [1, 2, 4, 3]
    assert t.postorder() == [4, 2, 3, 1]
    assert t.level_order() == [1, 2, 3, 4]


def test_empty_tree():
    t = BinaryTree()
    assert t.inorder() == []
    assert t.preorder() == []
    assert t.postorder() == []
    assert t.level_order() == []


def test_duplicate_insert_returns_existing(tree):
    node = tree.insert(7)
    assert node.data == 7
    assert tree.inorder() == sorted(VALUES)


def test_contains(tree):
    assert 15 in tree
    assert 16 not in tree


def test_remove_missing_is_noop(tree):
    tree.remove(99)
    assert tree.inorder() == sorted(VALUES)


def test_remove_root_and_all(tree):
    tree.remove(10)
    assert 10 not in tree
    assert tree.inorder() == sorted(v for v in VALUES if v != 10)
    for value in VALUES:
        tree.remove(value)
    assert tree.root is None
    assert tree.inorder() == []


def test_remove_leaf_and_single_child(tree):
    tree.remove(1)
    tree.remove(3)
    assert tree.inorder() == sorted(v for v in VALUES if v not in (1, 3))