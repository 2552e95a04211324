# bintree

A small library of linked binary tree nodes. Every node holds an integer
`value` and links to its `parent`, `left` and `right` nodes. Alongside the
node class there are measurements, traversals, shape checks and rotations.

## Installation

```
pip install bintree
```

## Building a tree

```python
from bintree.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
deep = left.insert_right(54)
left.insert_left(10)

deep.depth()        # 2
deep.uncle()        # right, the node holding 402
left.sibling()      # right
deep.is_leaf()      # True
root.is_root()      # True
list(deep.ancestors())                # [left, root], nearest first
lowest_common_ancestor(deep, right)   # root
```

`insert_left` and `insert_right` put the new node between the parent and any
child that was already there. The old child becomes the new node's child on
the same side.

`Node(value, parent)` records `parent` on the new node but does not make the
new node a child of `parent`; use `insert_left` or `insert_right` for that.

`lowest_common_ancestor` returns the deepest node that is an ancestor of both
nodes, or one of the nodes itself when it is an ancestor of the other. It
returns `None` when either argument is `None` or the nodes are in different
trees.

## Measuring

```python
from bintree.metrics import height, size, leaves, internal_nodes, balance

height(root)          # 2, edges on the longest downward path
size(root)            # 5
leaves(root)          # 3
internal_nodes(root)  # 2, nodes with at least one child
balance(root)         # 1, left height minus right height
```

Every measurement of `None` is `0`.

## Traversing

Each traversal is a generator of node values. None of them recurse, so deep
trees are fine.

```python
from bintree.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 10, 54, 402]
list(inorder(root))     # [10, 12, 54, 98, 402]
list(postorder(root))   # [10, 54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 10, 54]
```

Traversing `None` yields nothing.

## Checking shape

```python
from bintree.properties import is_full, is_perfect, is_complete, is_bst

is_full(root)       # True, every node has zero or two children
is_perfect(root)    # False, the last level is not filled
is_complete(root)   # True, levels are filled from the left
is_bst(root)        # True
```

`is_bst` requires values to be strictly ordered, so duplicate values make a
tree fail the check. Every check returns `False` for `None`.

## Rotating

```python
from bintree.rotation import rotate_left, rotate_right

new_root = rotate_right(root)   # the left child becomes the subtree root
```

A rotation returns the new subtree root, or `None` when the node is `None` or
has no child on the side it needs. The new root takes over the old root's
`parent`, but that parent's `left` or `right` link is not changed; when
rotating a subtree inside a larger tree, relink the parent yourself.

## What it does not do

The package works on trees you link together by hand. It has no insertion by
key, searching, removal, self-balancing or heap operations, and it does not
print or draw trees.

## Running the tests

```
pip install -e .[test]
pytest
```