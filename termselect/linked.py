"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list whose cheap insertion point is the front."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._length = 0
        if items is not None:
            tail: _Node | None = None
            for content in items:
                node = _Node(content)
                if tail is None:
                    self._head = node
                else:
                    tail.next = node
                tail = node
                self._length += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            following = node.next
            yield node.content
            node = following

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> None:
        """Insert content at the front."""
        self._head = _Node(content, self._head)
        self._length += 1

    def pop_front(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Remove the first element and return its content, passing it to delete first."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._length -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every element, front to back, passing each content to delete."""
        while self._head is not None:
            self.pop_front(delete)

    def each(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding func applied to every content, in order."""
        return LinkedList(func(content) for content in self)