"""Generic containers: a singly linked list, a chained hash table and a FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional, Tuple

__all__ = [
    "HASH_TABLE_SIZE",
    "LinkedList",
    "bucket_index",
    "HashTable",
    "Queue",
]

HASH_TABLE_SIZE = 64
_HASH_SEED = 5381
_MASK32 = 0xFFFFFFFF


class LinkedList:
    """Ordered sequence with cheap insertion and removal at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Deque[Any] = deque(items)

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before every other item."""
        self._items.appendleft(data)

    def push_back(self, data: Any) -> None:
        """Insert ``data`` after every other item."""
        self._items.append(data)

    def pop_front(self) -> Any:
        """Remove and return the first item, or None when the list is empty."""
        return self._items.popleft() if self._items else None

    def remove(self, data: Any) -> bool:
        """Remove the first item equal to ``data``; return whether one was found."""
        try:
            self._items.remove(data)
        except ValueError:
            return False
        return True

    def find(self, key: Any) -> Any:
        """Return the first item equal to ``key``, or None."""
        return next((item for item in self._items if item == key), None)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


def bucket_index(key: str) -> int:
    """Return the bucket a key hashes to (a djb2 variant using xor)."""
    h = _HASH_SEED
    for byte in key.encode("utf-8"):
        h = (((h << 5) + h) ^ byte) & _MASK32
    return h % HASH_TABLE_SIZE


class HashTable:
    """String-keyed table with separate chaining over a fixed bucket count.

    Inserting a key that is already present does not replace the old
    entry: the newer one shadows it until it is removed.
    """

    def __init__(self) -> None:
        self._buckets: List[List[Tuple[str, Any]]] = [
            [] for _ in range(HASH_TABLE_SIZE)
        ]
        self._count = 0

    def insert(self, key: str, value: Any) -> None:
        """Add an entry at the front of its bucket's chain."""
        self._buckets[bucket_index(key)].insert(0, (key, value))
        self._count += 1

    def lookup(self, key: str) -> Any:
        """Return the newest value stored under ``key``, or None."""
        return next(
            (value for k, value in self._buckets[bucket_index(key)] if k == key),
            None,
        )

    def remove(self, key: str) -> Any:
        """Remove the newest entry for ``key`` and return its value."""
        chain = self._buckets[bucket_index(key)]
        for position, (k, value) in enumerate(chain):
            if k == key:
                del chain[position]
                self._count -= 1
                return value
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(k == key for k, _ in self._buckets[bucket_index(key)])

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield ``(key, value)`` pairs bucket by bucket, over a snapshot."""
        snapshot = [pair for chain in self._buckets for pair in chain]
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(reversed(list(self.items())))!r})"


class Queue:
    """First-in first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item, or None when empty."""
        return self._items.popleft() if self._items else None

    def peek(self) -> Optional[Any]:
        """Return the front item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"