"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One list cell: a value and the link to the next cell."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with a head pointer."""

    def __init__(self, values: Any = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Insert *value* at the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append *value* at the tail and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The tail node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each value to *delete* first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.value)
            node.next = None
            node = following
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call *f* on every value, head to tail."""
        for value in self:
            f(value)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f(value)`` for each value.

        If *f* raises part way, the values already produced are passed to
        *delete* and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(f(value))
        except BaseException:
            result.clear(delete)
            raise
        return result