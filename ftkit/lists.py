"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with O(1) insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert a value at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append a value at the back and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every value in order."""
        for value in self:
            f(value)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``f`` applied to every value.

        If ``f`` raises, the values mapped so far are released with
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(f(value))
        except Exception:
            result.clear(delete)
            raise
        return result

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its value to ``delete`` and return the value."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each value to ``delete`` in order."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"