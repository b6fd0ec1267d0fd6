"""A red-black tree keyed by comparable values, with a shared black sentinel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


class Color(Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class Node:
    """A tree node; links point at the owning tree's sentinel when absent."""

    key: Any
    color: Color = Color.RED
    parent: Optional["Node"] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    _owner: Optional["RBTree"] = field(default=None, repr=False)

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, color={self.color.name})"


class RBTree:
    """Red-black tree allowing duplicate keys; equal keys go to the right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.nil = Node(key=None, color=Color.BLACK)
        self.root = self.nil
        self._size = 0
        for key in keys:
            self.insert(key)

    # -- rotations -------------------------------------------------------

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, y: Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self.nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self.nil:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    # -- insertion -------------------------------------------------------

    def insert(self, key: Any) -> Node:
        """Insert key and return the new node."""
        node = Node(key=key, color=Color.RED, left=self.nil, right=self.nil,
                    parent=self.nil, _owner=self)
        prev = self.nil
        cur = self.root
        while cur is not self.nil:
            prev = cur
            cur = cur.left if key < cur.key else cur.right

        node.parent = prev
        if prev is self.nil:
            self.root = node
        elif key < prev.key:
            prev.left = node
        else:
            prev.right = node

        self._insert_fixup(node)
        self._size += 1
        return node

    def _insert_fixup(self, cur: Node) -> None:
        while cur.parent.color is Color.RED:
            grand = cur.parent.parent
            if cur.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    cur.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    cur = grand
                else:
                    if cur is cur.parent.right:
                        cur = cur.parent
                        self._left_rotate(cur)
                    parent, grand = cur.parent, cur.parent.parent
                    parent.color, grand.color = grand.color, parent.color
                    self._right_rotate(grand)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    cur.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    cur = grand
                else:
                    if cur is cur.parent.left:
                        cur = cur.parent
                        self._right_rotate(cur)
                    parent, grand = cur.parent, cur.parent.parent
                    parent.color, grand.color = grand.color, parent.color
                    self._left_rotate(grand)
        self.root.color = Color.BLACK

    # -- lookup ----------------------------------------------------------

    def find(self, key: Any) -> Optional[Node]:
        """Return a node holding key, or None."""
        cur = self.root
        while cur is not self.nil:
            if cur.key > key:
                cur = cur.left
            elif cur.key < key:
                cur = cur.right
            else:
                return cur
        return None

    def _leftmost(self, node: Node) -> Node:
        while node.left is not self.nil:
            node = node.left
        return node

    def min(self) -> Optional[Node]:
        """Return the node with the smallest key, or None if empty."""
        if self.root is self.nil:
            return None
        return self._leftmost(self.root)

    def max(self) -> Optional[Node]:
        """Return the node with the largest key, or None if empty."""
        if self.root is self.nil:
            return None
        cur = self.root
        while cur.right is not self.nil:
            cur = cur.right
        return cur

    # -- removal ---------------------------------------------------------

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self.nil:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def erase(self, node: Node) -> None:
        """Remove node from the tree.

        Raises ValueError if the node is not currently in this tree.
        """
        if node._owner is not self:
            raise ValueError("node does not belong to this tree")

        y = node
        y_original_color = y.color
        if node.left is self.nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right is self.nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            y = self._leftmost(node.right)
            y_original_color = y.color
            x = y.right
            if y is not node.right:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            else:
                x.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y
            y.color = node.color

        if y_original_color is Color.BLACK:
            self._erase_fixup(x)

        self._detach(node)
        self._size -= 1

    def _erase_fixup(self, cur: Node) -> None:
        while cur is not self.root and cur.color is Color.BLACK:
            parent = cur.parent
            if cur is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color, parent.color = parent.color, sibling.color
                    self._left_rotate(parent)
                    sibling = cur.parent.right
                if (sibling.left.color is Color.BLACK
                        and sibling.right.color is Color.BLACK):
                    sibling.color = Color.RED
                    cur = cur.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._right_rotate(sibling)
                        sibling = cur.parent.right
                    sibling.color = cur.parent.color
                    sibling.right.color = Color.BLACK
                    cur.parent.color = Color.BLACK
                    self._left_rotate(cur.parent)
                    cur = self.root
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color, parent.color = parent.color, sibling.color
                    self._right_rotate(parent)
                    sibling = cur.parent.left
                if (sibling.right.color is Color.BLACK
                        and sibling.left.color is Color.BLACK):
                    sibling.color = Color.RED
                    cur = cur.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._left_rotate(sibling)
                        sibling = cur.parent.left
                    sibling.color = cur.parent.color
                    sibling.left.color = Color.BLACK
                    cur.parent.color = Color.BLACK
                    self._right_rotate(cur.parent)
                    cur = self.root
        cur.color = Color.BLACK

    @staticmethod
    def _detach(node: Node) -> None:
        node._owner = None
        node.parent = node.left = node.right = None

    def clear(self) -> None:
        """Remove every node."""
        stack = [self.root] if self.root is not self.nil else []
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not self.nil:
                    stack.append(child)
            self._detach(node)
        self.root = self.nil
        self.nil.parent = None
        self._size = 0

    # -- traversal -------------------------------------------------------

    def _nodes(self) -> Iterator[Node]:
        stack: list[Node] = []
        cur = self.root
        while stack or cur is not self.nil:
            while cur is not self.nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def to_list(self, limit: Optional[int] = None) -> list:
        """Return keys in ascending order, at most limit of them.

        Raises ValueError if limit is given and not positive.
        """
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        return list(islice(self, limit))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __bool__(self) -> bool:
        return self.root is not self.nil