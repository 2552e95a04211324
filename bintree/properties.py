"""Structural predicates on binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.metrics import height, size
from bintree.node import Node


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children (False if None)."""
    if tree is None:
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            continue
        if node.left is None or node.right is None:
            return False
        stack.extend((node.left, node.right))
    return True


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of the tree is completely filled (False if None)."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    return 2 ** (height(tree) + 1) - 1 == size(tree)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if the tree is filled level by level from the left (False if None)."""
    if tree is None:
        return False
    count = size(tree)
    stack: list[tuple[Node, int]] = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if index >= count:
            return False
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))
    return True


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree without duplicates (False if None)."""
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True