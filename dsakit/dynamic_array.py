"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_INITIAL_CAPACITY = 5


class DynamicArray:
    """Array of integers with an explicit capacity that starts at five and doubles."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._capacity = _INITIAL_CAPACITY
        for item in items:
            self.append(item)

    @property
    def capacity(self) -> int:
        """Number of elements the array holds before it has to grow."""
        return self._capacity

    def append(self, element: int) -> None:
        """Add ``element`` at the end, doubling the capacity if the array is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(element)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for length {len(self._items)}")

    def get(self, index: int) -> int:
        """Return the element at ``index``; raise IndexError if there is none."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, element: int) -> None:
        """Replace the element at ``index``, or append when ``index`` equals the length."""
        if index == len(self._items):
            self.append(element)
            return
        self._check_index(index)
        self._items[index] = element

    def copy(self) -> DynamicArray:
        """Return an independent copy with the same elements and capacity."""
        duplicate = DynamicArray()
        duplicate._items = list(self._items)
        duplicate._capacity = self._capacity
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"