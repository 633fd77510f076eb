"""Binary search tree of integers with traversals and structural queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _Node:
    info: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _inorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.info
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield node.info
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.info


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _count(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _common_parent(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    own = 2 if node.left is not None and node.right is not None else 0
    return own + _common_parent(node.left) + _common_parent(node.right)


def _parent_of(node: Optional[_Node], value: int) -> Optional[int]:
    if node is None:
        return None
    for child in (node.left, node.right):
        if child is not None and child.info == value:
            return node.info
    found = _parent_of(node.left, value)
    if found is not None:
        return found
    return _parent_of(node.right, value)


class BinarySearchTree:
    """A binary search tree; smaller values go left, larger go right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: int) -> None:
        """Insert ``value``; a value already in the tree is ignored."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.info:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            elif value > node.info:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                return

    def insert_recursive(self, value: int) -> None:
        """Insert ``value`` recursively; duplicates go to the right."""

        def place(node: Optional[_Node]) -> _Node:
            if node is None:
                return _Node(value)
            if value < node.info:
                node.left = place(node.left)
            else:
                node.right = place(node.right)
            return node

        self._root = place(self._root)

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return list(_preorder(self._root))

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return list(_postorder(self._root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self._root)

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    def maximum(self) -> int:
        """The largest value; ValueError when the tree is empty."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.info

    def minimum(self) -> int:
        """The smallest value; ValueError when the tree is empty."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.info

    def common_parent_nodes(self) -> int:
        """Number of nodes that share their parent with a sibling."""
        return _common_parent(self._root)

    def left_side_count(self) -> int:
        """Number of nodes in the root's left subtree."""
        return 0 if self._root is None else _count(self._root.left)

    def right_side_count(self) -> int:
        """Number of nodes in the root's right subtree."""
        return 0 if self._root is None else _count(self._root.right)

    def parent_of(self, value: int) -> Optional[int]:
        """Value of the first node, in preorder, with a child holding ``value``.

        Returns None when no node has such a child, as for the root.
        """
        return _parent_of(self._root, value)

    def __len__(self) -> int:
        return _count(self._root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"