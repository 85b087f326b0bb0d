"""A doubly linked list whose nodes can be located, inserted before and removed."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListNode:
    """One node of a :class:`LinkedList`, holding an item and its neighbours."""

    __slots__ = ("item", "prev", "next", "_owner")

    def __init__(
        self,
        item: Any,
        prev: ListNode | None = None,
        next: ListNode | None = None,
        owner: LinkedList | None = None,
    ) -> None:
        self.item = item
        self.prev = prev
        self.next = next
        self._owner = owner

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item!r})"


class LinkedList:
    """A doubly linked list with constant-time insertion and removal at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: ListNode | None = None
        self._last: ListNode | None = None
        self._size = 0
        for item in items:
            self.insert_back(item)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[ListNode]:
        node = self._first
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def copy(self) -> LinkedList:
        """Return an independent list holding the same items in the same order."""
        return LinkedList(self)

    @property
    def first(self) -> ListNode | None:
        """The first node, or ``None`` if the list is empty."""
        return self._first

    @property
    def last(self) -> ListNode | None:
        """The last node, or ``None`` if the list is empty."""
        return self._last

    def _check_owner(self, node: ListNode) -> None:
        if not isinstance(node, ListNode) or node._owner is not self:
            raise ValueError("node does not belong to this list")

    def insert_front(self, item: Any) -> ListNode:
        """Insert an item at the front and return its node."""
        node = ListNode(item, None, self._first, self)
        if self._first is not None:
            self._first.prev = node
        else:
            self._last = node
        self._first = node
        self._size += 1
        return node

    def insert_back(self, item: Any) -> ListNode:
        """Insert an item at the back and return its node."""
        node = ListNode(item, self._last, None, self)
        if self._last is not None:
            self._last.next = node
        else:
            self._first = node
        self._last = node
        self._size += 1
        return node

    @staticmethod
    def _detach(node: ListNode) -> Any:
        node.prev = node.next = None
        node._owner = None
        return node.item

    def remove_front(self) -> Any:
        """Remove the first node and return its item."""
        node = self._first
        if node is None:
            raise IndexError("remove_front from an empty list")
        if node is not self._last:
            node.next.prev = None
        else:
            self._last = None
        self._first = node.next
        self._size -= 1
        return self._detach(node)

    def remove_back(self) -> Any:
        """Remove the last node and return its item."""
        node = self._last
        if node is None:
            raise IndexError("remove_back from an empty list")
        if node is not self._first:
            node.prev.next = None
        else:
            self._first = None
        self._last = node.prev
        self._size -= 1
        return self._detach(node)

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self._nodes()):
            self._detach(node)
        self._first = self._last = None
        self._size = 0

    def insert_before(self, item: Any, node: ListNode) -> ListNode:
        """Insert an item just before ``node`` and return the new node."""
        self._check_owner(node)
        if node is self._first:
            return self.insert_front(item)
        new_node = ListNode(item, node.prev, node, self)
        node.prev.next = new_node
        node.prev = new_node
        self._size += 1
        return new_node

    def remove_node(self, node: ListNode) -> Any:
        """Remove ``node`` from the list and return its item."""
        self._check_owner(node)
        if node is self._first:
            return self.remove_front()
        if node is self._last:
            return self.remove_back()
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return self._detach(node)

    def find(self, item: Any) -> ListNode | None:
        """Return the first node holding ``item``, or ``None`` if there is none."""
        return next((node for node in self._nodes() if node.item == item), None)