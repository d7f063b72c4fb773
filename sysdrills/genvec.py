"""A growable vector of object references with a fixed growth step."""

from __future__ import annotations

from typing import Any, Iterator, List

__all__ = [
    "VectorError",
    "VectorAllocationError",
    "VectorUnderflowError",
    "Vector",
]


class VectorError(Exception):
    """Base class for vector failures."""


class VectorAllocationError(VectorError):
    """Raised when a full vector is not allowed to grow."""


class VectorUnderflowError(VectorError, IndexError):
    """Raised when an item is removed from an empty vector."""


class Vector:
    """Vector that grows by ``block_size`` slots whenever it is full.

    A block size of zero makes the capacity fixed. ``None`` is not a
    valid item.
    """

    def __init__(self, initial_capacity: int, block_size: int) -> None:
        if initial_capacity < 0 or block_size < 0:
            raise ValueError("capacity and block size must not be negative")
        if initial_capacity == 0 and block_size == 0:
            raise ValueError("a vector needs a capacity or a block size")
        self._items: List[Any] = []
        self._capacity = initial_capacity
        self._block_size = block_size

    @property
    def capacity(self) -> int:
        """Number of items the vector can hold before it must grow."""
        return self._capacity

    @property
    def block_size(self) -> int:
        """Number of slots added on each growth step."""
        return self._block_size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def append(self, item: Any) -> None:
        """Add an item at the end, growing the vector if needed."""
        if item is None:
            raise ValueError("cannot store None in the vector")
        if len(self._items) == self._capacity:
            if self._block_size == 0:
                raise VectorAllocationError("vector is full and cannot grow")
            self._capacity += self._block_size
        self._items.append(item)

    def remove(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise VectorUnderflowError("remove from an empty vector")
        return self._items.pop()

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if value is None:
            raise ValueError("cannot store None in the vector")
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._items!r}, capacity={self._capacity}, "
            f"block_size={self._block_size})"
        )