"""A hash set built from an array of linked-list buckets."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

from structlab.linked_list import LinkedList


class HashTable:
    """A set of hashable items stored in a fixed number of chained buckets.

    An item's bucket is ``hash(item) % bucket_count``. Two items are the same
    entry when they compare equal, so items with custom ``__eq__`` and
    ``__hash__`` decide what counts as a duplicate.
    """

    def __init__(self, bucket_count: int) -> None:
        bucket_count = operator.index(bucket_count)
        if bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self._buckets: list[LinkedList] = [LinkedList() for _ in range(bucket_count)]
        self._size = 0

    def _bucket(self, item: Any) -> LinkedList:
        return self._buckets[hash(item) % len(self._buckets)]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Any) -> bool:
        return self._bucket(item).find(item) is not None

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bucket_count={len(self._buckets)}, items={self.items()!r})"

    def copy(self) -> HashTable:
        """Return an independent table with the same buckets and items."""
        duplicate = HashTable(len(self._buckets))
        duplicate._buckets = [bucket.copy() for bucket in self._buckets]
        duplicate._size = self._size
        return duplicate

    @property
    def bucket_count(self) -> int:
        """The number of buckets."""
        return len(self._buckets)

    def insert(self, item: Any) -> bool:
        """Add ``item`` unless an equal item is present; return whether it was added."""
        if item in self:
            return False
        self._bucket(item).insert_front(item)
        self._size += 1
        return True

    def remove(self, item: Any) -> None:
        """Remove the entry equal to ``item``; raise KeyError if there is none."""
        bucket = self._bucket(item)
        node = bucket.find(item)
        if node is None:
            raise KeyError(item)
        bucket.remove_node(node)
        self._size -= 1

    def items(self) -> list[Any]:
        """Return the stored items, bucket by bucket, in no meaningful order."""
        return list(self)

    def clear(self) -> None:
        """Remove every item, keeping the same number of buckets."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def max_load(self) -> int:
        """Return the number of items in the fullest bucket."""
        return max(len(bucket) for bucket in self._buckets)

    def update(self, item: Any) -> None:
        """Replace the entry equal to ``item`` with ``item``, or add it if absent."""
        if item in self:
            self.remove(item)
        self.insert(item)