"""A fixed-length array with bounds-checked indexing."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class Array:
    """An array whose length is set at construction and never changes."""

    def __init__(self, length: int, fill: Any = None) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self._items: list[Any] = [fill] * length

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of length {len(self._items)}"
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