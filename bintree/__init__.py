"""Linked binary tree nodes with traversals, metrics, shape checks and rotations."""

__version__ = "0.1.0"
__all__ = ["metrics", "node", "properties", "rotation", "traversal"]