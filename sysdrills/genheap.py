"""A binary heap that arranges the items of a vector it is given."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, Sequence

from sysdrills.genvec import Vector

__all__ = ["Heap", "int_max_comparator", "main"]

Comparator = Callable[[Any, Any], int]
Action = Callable[[Any, Any], Any]


class Heap:
    """Heap over a caller-owned vector.

    ``comparator(left, right)`` returns a negative number when ``left``
    ranks below ``right``; the highest-ranked item sits on top.
    """

    def __init__(self, vector: Vector, comparator: Comparator) -> None:
        if vector is None:
            raise TypeError("a vector is required")
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._vec: Optional[Vector] = vector
        self._comp = comparator
        for index in range(len(vector) // 2 - 1, -1, -1):
            self._sift_down(index)

    @property
    def _vector(self) -> Vector:
        if self._vec is None:
            raise RuntimeError("heap has been released")
        return self._vec

    def _sift_down(self, index: int) -> None:
        vec = self._vector
        size = len(vec)
        while True:
            best = index
            best_val = vec[index]
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._comp(best_val, vec[child]) < 0:
                    best, best_val = child, vec[child]
            if best == index:
                return
            vec[best] = vec[index]
            vec[index] = best_val
            index = best

    def _sift_up(self, index: int) -> None:
        vec = self._vector
        while index > 0:
            parent = (index - 1) // 2
            current, above = vec[index], vec[parent]
            if self._comp(above, current) >= 0:
                return
            vec[parent] = current
            vec[index] = above
            index = parent

    def insert(self, element: Any) -> None:
        """Add an element; a full fixed-size vector raises VectorAllocationError."""
        if element is None:
            raise ValueError("cannot insert None into the heap")
        vec = self._vector
        vec.append(element)
        self._sift_up(len(vec) - 1)

    def peek(self) -> Any:
        """Return the top element without removing it, or None if empty."""
        vec = self._vector
        return vec[0] if len(vec) else None

    def extract(self) -> Any:
        """Remove and return the top element, or None if empty."""
        vec = self._vector
        if not len(vec):
            return None
        top = vec[0]
        last = vec.remove()
        if len(vec):
            vec[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return 0 if self._vec is None else len(self._vec)

    def for_each(self, action: Action, context: Any = None) -> int:
        """Call ``action(element, context)`` in array order.

        Iteration stops after the first call that returns a false value.
        Returns the number of calls made.
        """
        count = 0
        for element in self._vector:
            count += 1
            if not action(element, context):
                break
        return count

    def release(self) -> Optional[Vector]:
        """Detach and return the underlying vector; None if already released."""
        vec, self._vec = self._vec, None
        return vec


def int_max_comparator(left: int, right: int) -> int:
    """Order integers so that the largest rises to the top."""
    return left - right


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a max-heap of integers and print each step."""
    out = sys.stdout
    out.write("--- Generic Heap & Vector Test Program ---\n\n")

    vec = Vector(5, 5)
    out.write("-> Vector successfully created.\n")
    heap = Heap(vec, int_max_comparator)
    out.write("-> Heap successfully built.\n")

    out.write("\n--- Inserting Elements (50, 30, 80, 10, 90, 20) ---\n")
    for value in (50, 30, 80, 10, 90, 20):
        heap.insert(value)
    out.write(f"Current Heap Size: {len(heap)}\n")

    top = heap.peek()
    if top is not None:
        out.write(f"\nPeek at Top (Should be 90): {top}\n")

    out.write("\n--- Underlying Array State (Level-Order) ---\n")
    out.write("Elements: ")

    def _print(element: Any, _context: Any) -> bool:
        out.write(f"{element} ")
        return True

    count = heap.for_each(_print)
    out.write(f"\nTotal iterated: {count}\n")

    out.write("\n--- Extracting Elements ---\n")
    for _ in range(2):
        value = heap.extract()
        if value is not None:
            out.write(f"Extracted: {value}\n")
    out.write(f"Heap Size after extraction: {len(heap)}\n")

    out.write("\n--- Destroying Heap and Vector ---\n")
    vec = heap.release()
    if len(heap) == 0:
        out.write("Heap wrapper successfully destroyed.\n")
    while vec is not None and len(vec):
        vec.remove()
    out.write("Vector and remaining elements successfully destroyed.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())