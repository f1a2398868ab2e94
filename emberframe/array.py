"""A growable array with fixed-stride memory accounting."""

from __future__ import annotations

from emberframe.memory import MemoryTag, default_tracker

__all__ = [
    "DynamicArray",
    "HEADERS_SIZE",
    "DEFAULT_CAPACITY",
    "RESIZE_FACTOR",
]

_HEADER_COUNT = 3  # capacity, length, stride
_WORD_SIZE = 8
HEADERS_SIZE = _HEADER_COUNT * _WORD_SIZE
DEFAULT_CAPACITY = 1
RESIZE_FACTOR = 2


class DynamicArray:
    """An array of elements of ``stride`` bytes each that doubles its capacity when full.

    Its reserved size is reported to a memory tracker under the array tag.
    """

    def __init__(self, stride, capacity=DEFAULT_CAPACITY, tracker=None):
        if stride < 0:
            raise ValueError(f"stride must not be negative: {stride}")
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._tracker = tracker if tracker is not None else default_tracker
        self._stride = stride
        self._capacity = capacity
        self._items: list = []
        self._alive = True
        self._tracker.allocate(self.size, MemoryTag.ARRAY)

    @property
    def capacity(self):
        """Number of elements that fit before the array must grow."""
        return self._capacity

    @property
    def stride(self):
        """Size in bytes of one element."""
        return self._stride

    @property
    def size(self):
        """Bytes reserved: headers plus capacity times stride."""
        return HEADERS_SIZE + self._capacity * self._stride

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        self._check_alive()
        return self._items[index]

    def __iter__(self):
        self._check_alive()
        return iter(self._items)

    def __repr__(self):
        return f"DynamicArray({self._items!r}, capacity={self._capacity}, stride={self._stride})"

    def push(self, value):
        """Append ``value``, growing if the array is full."""
        self._check_alive()
        if len(self._items) >= self._capacity:
            self._grow()
        self._items.append(value)

    def pop(self):
        """Remove and return the last element."""
        self._check_alive()
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def pop_at(self, index):
        """Remove and return the element at ``index``, shifting later ones down."""
        self._check_alive()
        self._check_index(index)
        return self._items.pop(index)

    def insert_at(self, index, value):
        """Insert ``value`` before the existing element at ``index``."""
        self._check_alive()
        self._check_index(index)
        if len(self._items) >= self._capacity:
            self._grow()
        self._items.insert(index, value)

    def clear(self):
        """Drop every element, keeping the capacity."""
        self._check_alive()
        self._items.clear()

    def destroy(self):
        """Release the array's memory; it cannot be used afterwards."""
        self._check_alive()
        self._tracker.release(self.size, MemoryTag.ARRAY)
        self._items.clear()
        self._alive = False

    def _grow(self):
        old_size = self.size
        self._capacity = max(1, RESIZE_FACTOR * self._capacity)
        self._tracker.allocate(self.size, MemoryTag.ARRAY)
        self._tracker.release(old_size, MemoryTag.ARRAY)

    def _check_index(self, index):
        length = len(self._items)
        if not 0 <= index < length:
            raise IndexError(f"Array index out of bounds. Length: {length}, index: {index}")

    def _check_alive(self):
        if not self._alive:
            raise RuntimeError("array has been destroyed")