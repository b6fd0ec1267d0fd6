# redblack

A red-black tree that keeps keys in sorted order. Insertion, lookup and
removal each take O(log n) time. Duplicate keys are allowed; a key equal to
one already in the tree is placed to its right. Keys may be any values that
support `<` and `>` against each other.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from redblack.tree import RBTree

tree = RBTree([10, 5, 8, 34, 67, 23])

node = tree.insert(12)      # returns the new Node
tree.find(8)                # a Node holding 8, or None if there is none
8 in tree                   # True
len(tree)                   # 7

tree.min().key              # 5
tree.max().key              # 67

tree.erase(tree.find(34))   # remove a node returned by insert or find
list(tree)                  # keys in ascending order
tree.to_list(3)             # at most the first three keys: [5, 8, 10]

tree.clear()
bool(tree)                  # False
```

## Reference

All names live in `redblack.tree`.

- `RBTree(keys=())` builds a tree, inserting each of `keys` in turn.
- `insert(key)` adds `key` and returns its `Node`.
- `find(key)` returns a `Node` holding `key`, or `None`.
- `min()` and `max()` return the node with the smallest or largest key, or
  `None` when the tree is empty.
- `erase(node)` removes a node. It raises `ValueError` if the node is not
  currently in this tree (for example one already erased, or one from
  another tree).
- `to_list(limit=None)` returns the keys in ascending order, at most `limit`
  of them. It raises `ValueError` if `limit` is given and not positive.
- `clear()` removes every node.
- Iterating a tree yields its keys in ascending order; `len()`, `in` and
  `bool()` work as expected.

`Node` objects are the handles the tree gives out. Each has a `key` and a
`color`, a `Color` that is either `Color.RED` or `Color.BLACK`. Once a node
is erased or the tree is cleared, its links are dropped and it can no longer
be passed to `erase`.