"""A first-in first-out queue built on the doubly linked list."""

from __future__ import annotations

from typing import Any

from sysdrills.dll import DoublyLinkedList, ListUnderflowError

__all__ = ["QueueUnderflowError", "Queue"]


class QueueUnderflowError(IndexError):
    """Raised when an item is dequeued from an empty queue."""


class Queue:
    """FIFO queue that accepts any item except None."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def enqueue(self, item: Any) -> None:
        """Add an item at the back."""
        self._items.push_tail(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        try:
            return self._items.pop_head()
        except ListUnderflowError:
            raise QueueUnderflowError("dequeue from an empty queue") from None

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"