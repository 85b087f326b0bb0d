"""A resizable array with explicit size control, insertion and removal."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class DynamicArray:
    """An array whose size can change at run time.

    Slots created by growing the array hold ``None`` until they are assigned.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._items: list[Any] = [None] * size

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._items)}"
            )
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check_index(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def copy(self) -> DynamicArray:
        """Return an independent array holding the same items."""
        duplicate = DynamicArray()
        duplicate._items = list(self._items)
        return duplicate

    def push_back(self, item: Any) -> None:
        """Add an item to the end of the array."""
        self._items.append(item)

    def resize(self, new_size: int) -> None:
        """Change the size, keeping items whose index is below the new size."""
        if new_size < 0:
            raise ValueError(f"size must be non-negative, got {new_size}")
        current = len(self._items)
        if new_size <= current:
            del self._items[new_size:]
        else:
            self._items.extend([None] * (new_size - current))

    def insert(self, index: int, item: Any) -> None:
        """Insert an item before ``index``; ``index`` may equal the size."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insert index {index} out of range for array of size {len(self._items)}"
            )
        self._items.insert(index, item)

    def erase(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items left."""
        del self._items[self._check_index(index)]

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop_back from an empty array")
        return self._items.pop()

    def find(self, item: Any) -> int:
        """Return the index of the first occurrence of ``item``, or -1."""
        return next((i for i, value in enumerate(self._items) if value == item), -1)