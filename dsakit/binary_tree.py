"""An unbalanced integer binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class BST:
    """A binary search tree node; the root node stands for the whole tree.

    Equal values are placed in the right subtree.
    """

    value: int = 0
    left: Optional["BST"] = None
    right: Optional["BST"] = None

    def insert(self, value: int) -> "BST":
        """Insert ``value`` and return the tree.

        A fresh tree holding only the value 0 takes a non-zero value as its root.
        """
        if value != 0 and self.left is None and self.right is None and self.value == 0:
            self.value = value
            return self

        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BST(value)
                    return self
                node = node.left
            else:
                if node.right is None:
                    node.right = BST(value)
                    return self
                node = node.right

    def contains(self, value: int) -> bool:
        """Return whether ``value`` is in the tree."""
        node: Optional[BST] = self
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def remove(self, value: int) -> Optional["BST"]:
        """Remove one node holding ``value`` and return the tree.

        Returns None when the value is absent, or when it is held by a root
        with no children (the tree is then left as it was).
        """
        if not self.contains(value):
            return None

        parent: Optional[BST] = None
        node = self
        came_from_left = False
        while node.value != value:
            parent = node
            if value < node.value:
                node, came_from_left = node.left, True
            else:
                node, came_from_left = node.right, False

        two_children = node.left is not None and node.right is not None
        if two_children or (parent is None and node.right is not None):
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
            node.value = successor.value
            return self

        if parent is None:
            if node.left is None:
                return None
            child = node.left
            self.value, self.left, self.right = child.value, child.left, child.right
            return self

        child = node.left if node.left is not None else node.right
        if came_from_left:
            parent.left = child
        else:
            parent.right = child
        return self

    def get_min(self) -> int:
        """Return the smallest value in the tree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.value

    def get_max(self) -> int:
        """Return the largest value in the tree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.value

    def preorder(self) -> Iterator[int]:
        """Yield the values in pre-order: node, left subtree, right subtree."""
        pending: list[BST] = [self]
        while pending:
            node = pending.pop()
            yield node.value
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def balance(self) -> None:
        """Rebuild the tree with the middle pre-order value as its root."""
        values = list(self.preorder())
        root_index = len(values) // 2
        self.value = values[root_index]
        self.left = None
        self.right = None
        for index, value in enumerate(values):
            if index != root_index:
                self.insert(value)