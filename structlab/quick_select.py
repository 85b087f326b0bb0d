"""Selection of the k-th smallest value without fully sorting."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any


def _partition(values: list[Any], lo: int, hi: int) -> int:
    """Partition ``values[lo:hi]`` around its middle element; return the pivot's index."""
    last = hi - 1
    middle = lo + (hi - lo) // 2
    values[middle], values[last] = values[last], values[middle]
    pivot = values[last]

    low, high = lo, hi - 2
    while low <= high:
        if values[low] < pivot:
            low += 1
        elif values[high] >= pivot:
            high -= 1
        else:
            values[low], values[high] = values[high], values[low]

    values[last], values[high + 1] = values[high + 1], values[last]
    return high + 1


def quick_select(values: Iterable[Any], k: int) -> Any:
    """Return the value at index ``k`` of the sorted version of ``values``.

    The input is not modified. Runs in expected linear time.
    """
    items = list(values)
    if not items:
        raise ValueError("quick_select of an empty sequence")
    k = operator.index(k)
    if not 0 <= k < len(items):
        raise IndexError(f"k={k} out of range for {len(items)} values")

    lo, hi = 0, len(items)
    while True:
        pivot_index = _partition(items, lo, hi)
        if k == pivot_index:
            return items[k]
        if k < pivot_index:
            hi = pivot_index
        else:
            lo = pivot_index + 1