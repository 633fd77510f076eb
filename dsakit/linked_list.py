"""Singly linked list of integers with in-place sorting and reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list whose nodes hold integers."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._head: Optional[_Node] = None
        for value in values or ():
            self.append(value)

    @staticmethod
    def _walk(node: Optional[_Node]) -> Iterator[_Node]:
        while node is not None:
            yield node
            node = node.next

    def _nodes(self) -> Iterator[_Node]:
        return self._walk(self._head)

    def append(self, value: int) -> None:
        """Add a value at the right end of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
            return
        last = None
        for last in self._nodes():
            pass
        last.next = new

    def prepend(self, value: int) -> None:
        """Add a value at the left end of the list."""
        self._head = _Node(value, self._head)

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; ValueError if absent."""
        previous = None
        for node in self._nodes():
            if node.data == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{value} is not in the list")

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Positions run from 1 to the current length; position 0 is reached
        with :meth:`prepend`.
        """
        size = len(self)
        if not 1 <= index <= size:
            raise IndexError(f"index {index} out of range 1..{size}")
        previous = self._head
        for _ in range(index - 1):
            previous = previous.next
        previous.next = _Node(value, previous.next)

    def selection_sort(self) -> None:
        """Sort the values in ascending order by selection sort."""
        for node in self._nodes():
            smallest = min(self._walk(node), key=lambda n: n.data)
            if smallest is not node:
                node.data, smallest.data = smallest.data, node.data

    def bubble_sort(self) -> None:
        """Sort the values in ascending order by bubble sort."""
        size = len(self)
        for done in range(size - 1):
            node = self._head
            for _ in range(size - done - 1):
                if node.data > node.next.data:
                    node.data, node.next.data = node.next.data, node.data
                node = node.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def sample_list() -> LinkedList:
    """Return the six-element list 7, 14, 21, 28, 35, 42."""
    return LinkedList([7, 14, 21, 28, 35, 42])