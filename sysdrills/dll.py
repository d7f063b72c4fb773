"""A doubly linked list with sentinel head and tail nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

__all__ = ["ListUnderflowError", "DoublyLinkedList"]


class ListUnderflowError(IndexError):
    """Raised when an item is popped from an empty list."""


class _Node:
    __slots__ = ("item", "prev", "next")

    def __init__(self, item: Any = None) -> None:
        self.item = item
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList:
    """Double-ended list that accepts any item except None."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for item in items:
            self.push_tail(item)

    def _insert_before(self, successor: _Node, item: Any) -> None:
        if item is None:
            raise ValueError("cannot store None in the list")
        node = _Node(item)
        node.next = successor
        node.prev = successor.prev
        successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.item

    def push_head(self, item: Any) -> None:
        """Insert an item at the front."""
        self._insert_before(self._head.next, item)

    def push_tail(self, item: Any) -> None:
        """Insert an item at the back."""
        self._insert_before(self._tail, item)

    def pop_head(self) -> Any:
        """Remove and return the front item."""
        if not self._size:
            raise ListUnderflowError("pop from an empty list")
        return self._unlink(self._head.next)

    def pop_tail(self) -> Any:
        """Remove and return the back item."""
        if not self._size:
            raise ListUnderflowError("pop from an empty list")
        return self._unlink(self._tail.prev)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"