"""Doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: int
    prev: Optional["_Node"] = field(default=None, repr=False)
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        for value in values or ():
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: int) -> _Node:
        for node in self._nodes():
            if node.data == target:
                return node
        raise ValueError(f"{target} is not in the list")

    def append(self, value: int) -> None:
        """Add a value at the end."""
        new = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = new
        else:
            self._tail.next = new
        self._tail = new

    def prepend(self, value: int) -> None:
        """Add a value at the beginning."""
        new = _Node(value, next=self._head)
        if self._head is None:
            self._tail = new
        else:
            self._head.prev = new
        self._head = new

    def insert_before(self, target: int, value: int) -> None:
        """Insert ``value`` before the first node holding ``target``."""
        node = self._find(target)
        new = _Node(value, prev=node.prev, next=node)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` after the first node holding ``target``."""
        node = self._find(target)
        new = _Node(value, prev=node, next=node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; ValueError if absent."""
        node = self._find(value)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"