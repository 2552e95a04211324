"""Measurements of binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest root-to-leaf path (0 if None)."""
    if tree is None:
        return 0
    level = [tree]
    edges = 0
    while True:
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        if not level:
            return edges
        edges += 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def _balance_height(tree: Optional[Node]) -> int:
    # Counts nodes on the longest downward path; an absent tree counts as 0.
    if tree is None:
        return 0
    return height(tree) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left subtree height minus right subtree height."""
    if tree is None:
        return 0
    return _balance_height(tree.left) - _balance_height(tree.right)