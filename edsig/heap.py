"""A max-heap of indices into a list of scalars, ordered by scalar value."""

from __future__ import annotations

from collections.abc import MutableSequence

from edsig.scalar import Scalar

__all__ = ["IndexHeap"]

_MIN_LENGTH = 3


class IndexHeap:
    """Heap of indices into ``scalars``; the root indexes the largest scalar.

    The scalar list is held by reference, so callers may replace the scalar
    at the root index and then call :meth:`root_replaced`.
    """

    def __init__(self, scalars: MutableSequence[Scalar], length: int) -> None:
        if length < _MIN_LENGTH:
            raise ValueError(f"heap needs at least {_MIN_LENGTH} entries, got {length}")
        if length > len(scalars):
            raise ValueError(
                f"heap length {length} exceeds the {len(scalars)} scalars given"
            )
        self._scalars = scalars
        self._heap: list[int] = [0]
        for index in range(1, length):
            self.push(index)

    def __len__(self) -> int:
        return len(self._heap)

    def _less(self, a: int, b: int) -> bool:
        return self._scalars[self._heap[a]] < self._scalars[self._heap[b]]

    def push(self, index: int) -> None:
        """Add a scalar index and move it up towards the root."""
        if not 0 <= index < len(self._scalars):
            raise IndexError(f"scalar index {index} out of range")
        heap = self._heap
        heap.append(index)
        pos = len(heap) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._less(parent, pos):
                break
            heap[parent], heap[pos] = heap[pos], heap[parent]
            pos = parent

    def extend(self, new_length: int) -> None:
        """Push the indices from the current length up to ``new_length``."""
        if new_length > len(self._scalars):
            raise ValueError(
                f"heap length {new_length} exceeds the {len(self._scalars)} scalars given"
            )
        for index in range(len(self._heap), new_length):
            self.push(index)

    def two_largest(self) -> tuple[int, int]:
        """Indices of the largest and the second largest scalar."""
        heap = self._heap
        second = heap[2] if self._less(1, 2) else heap[1]
        return heap[0], second

    def root_replaced(self) -> None:
        """Restore the heap order after the root's scalar has decreased."""
        heap = self._heap
        size = len(heap)
        pos = 0
        while True:
            left = 2 * pos + 1
            if left >= size:
                break
            right = left + 1
            child = right if right < size and self._less(left, right) else left
            if not self._less(pos, child):
                break
            heap[pos], heap[child] = heap[child], heap[pos]
            pos = child