from bintree.metrics import size
from bintree.node import Node
from bintree.properties import is_bst
from bintree.rotation import rotate_left, rotate_right
from bintree.traversal import inorder, preorder


def bst_from(values):
    root = Node(values[0])
    for value in values[1:]:
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.insert_left(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.insert_right(value)
                    break
                node = node.right
    return root


def check_parents(tree):
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)


def test_rotate_none_returns_none():
    assert rotate_left(None) is None
    assert rotate_right(None) is None


def test_rotate_without_needed_child_returns_none():
    root = Node(1)
    root.insert_left(0)
    assert rotate_left(root) is None
    lone = Node(1)
    lone.insert_right(2)
    assert rotate_right(lone) is None


def test_rotate_left_new_root_is_old_right_child():
    root = bst_from([98, 90, 128, 110, 150])
    old_right = root.right
    new_root = rotate_left(root)
    assert new_root is old_right
    assert new_root.left is root
    assert root.parent is new_root
    assert new_root.parent is None


def test_rotate_right_new_root_is_old_left_child():
    root = bst_from([98, 64, 128, 32, 70])
    old_left = root.left
    new_root = rotate_right(root)
    assert new_root is old_left
    assert new_root.right is root
    assert root.parent is new_root
    assert new_root.parent is None


def test_rotations_preserve_order_and_bst():
    values = [98, 64, 128, 32, 70, 110, 150, 65, 120]
    root = bst_from(values)
    rotated = rotate_left(root)
    assert list(inorder(rotated)) == sorted(values)
    assert is_bst(rotated) is True
    assert size(rotated) == len(values)
    check_parents(rotated)
    rotated = rotate_right(rotated)
    rotated = rotate_right(rotated)
    assert list(inorder(rotated)) == sorted(values)
    assert is_bst(rotated) is True
    check_parents(rotated)


def test_inner_subtree_moves_across():
    root = bst_from([50, 30, 80, 70, 90])
    inner = root.right.left
    new_root = rotate_left(root)
    assert root.right is inner
    assert inner.parent is root
    assert new_root.right.value == 90


def test_round_trip_restores_shape():
    root = bst_from([50, 30, 80, 20, 40, 70, 90])
    before = list(preorder(root))
    restored = rotate_right(rotate_left(root))
    assert restored is root
    assert list(preorder(restored)) == before
    check_parents(restored)


def test_subtree_rotation_keeps_outer_parent():
    root = bst_from([50, 30, 80, 70, 90])
    subtree = root.right
    pivot = rotate_right(subtree)
    assert pivot.parent is root
    assert subtree.parent is pivot
    assert root.right is subtree