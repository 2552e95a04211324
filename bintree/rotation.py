"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the tree left and return its new root.

    Returns None if the tree is None or has no right child. The new root takes
    over the old root's parent, but that parent's child link is left unchanged.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the tree right and return its new root.

    Returns None if the tree is None or has no left child. The new root takes
    over the old root's parent, but that parent's child link is left unchanged.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot