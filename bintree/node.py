"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        # The parent is recorded but this node is not linked as its child.
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child, moving any existing left child beneath it."""
        child = Node(value, self)
        child.left = self.left
        if child.left is not None:
            child.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child, moving any existing right child beneath it."""
        child = Node(value, self)
        child.right = self.right
        if child.right is not None:
            child.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def ancestors(self) -> Iterator[Node]:
        """Yield the node's ancestors, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Return the number of edges between the node and its root."""
        return sum(1 for _ in self.ancestors())

    def sibling(self) -> Optional[Node]:
        """Return the other child of the node's parent, or None."""
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of the node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of (or equal to) both nodes.

    Returns None if either node is None or they share no ancestor.
    """
    if first is None or second is None:
        return None

    depth_first = first.depth()
    depth_second = second.depth()
    a: Optional[Node] = first
    b: Optional[Node] = second
    while depth_first > depth_second:
        a = a.parent  # type: ignore[union-attr]
        depth_first -= 1
    while depth_second > depth_first:
        b = b.parent  # type: ignore[union-attr]
        depth_second -= 1
    while a is not None and b is not None:
        if a is b:
            return a
        a = a.parent
        b = b.parent
    return None