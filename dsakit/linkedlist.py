"""Singly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """One link of a singly linked list."""

    data: int
    next: ListNode | None = None


class LinkedList:
    """Singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def is_empty(self) -> bool:
        return self.head is None

    def push_front(self, value: int) -> ListNode:
        """Insert ``value`` at the head and return its node."""
        node = ListNode(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1
        return node

    def push_back(self, value: int) -> ListNode:
        """Append ``value`` at the tail and return its node."""
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self._size += 1
        return node

    def insert_after(self, node: ListNode, value: int) -> ListNode:
        """Insert ``value`` after ``node``; an empty list just gains the value."""
        if self.is_empty():
            return self.push_back(value)
        new = ListNode(value, node.next)
        node.next = new
        if node is self.tail:
            self.tail = new
        self._size += 1
        return new

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self._size -= 1
        return node.data

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        prev: ListNode | None = None
        node = self.head
        while node is not self.tail:
            prev, node = node, node.next  # type: ignore[assignment]
        if prev is None:
            self.head = self.tail = None
        else:
            prev.next = None
            self.tail = prev
        self._size -= 1
        return node.data

    def remove(self, value: int) -> int:
        """Remove ``value`` and return how many nodes were dropped.

        When the head or the tail holds ``value`` those ends are removed
        (both, if both match); otherwise the first interior match goes.
        Raises ValueError when nothing matches.
        """
        if self.head is None or self.tail is None:
            raise ValueError("remove from empty list")
        if self.head.data != value and self.tail.data != value:
            prev = self.head
            node = self.head.next
            while node is not None and node.data != value:
                prev, node = node, node.next
            if node is None:
                raise ValueError(f"{value!r} not in list")
            prev.next = node.next
            node.next = None
            self._size -= 1
            return 1
        removed = 0
        if self.head.data == value:
            self.pop_front()
            removed += 1
        if self.tail is not None and self.tail.data == value:
            self.pop_back()
            removed += 1
        return removed

    def find(self, value: int) -> ListNode | None:
        """Return the first node holding ``value``, or None."""
        node = self.head
        while node is not None:
            if node.data == value:
                return node
            node = node.next
        return None

    def index(self, value: int) -> int:
        """Return the position of the first ``value``; ValueError if absent."""
        for position, data in enumerate(self):
            if data == value:
                return position
        raise ValueError(f"{value!r} not in list")

    def extend(self, other: LinkedList) -> None:
        """Move every node of ``other`` onto the end of this list.

        ``other`` is left empty. Extending a list with itself appends a copy.
        """
        if other is self:
            for value in list(self):
                self.push_back(value)
            return
        if other.head is None:
            return
        if self.tail is None:
            self.head = other.head
        else:
            self.tail.next = other.head
        self.tail = other.tail
        self._size += other._size
        other.head = other.tail = None
        other._size = 0

    def greater_than(self, k: int) -> Iterator[int]:
        """Yield the values larger than ``k`` in list order."""
        return (value for value in self if value > k)

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the linked-list demonstration."""
    items = LinkedList()
    for value in (10, 20, 30):
        items.push_front(value)
    for value in (5, 1):
        items.push_back(value)

    print("Values greater than 10:")
    for value in items.greater_than(10):
        print(value)

    target = 5
    try:
        print(f"Value {target} is at position {items.index(target)}")
    except ValueError:
        print(f"Value {target} not found")

    items.pop_front()
    items.pop_back()
    items.remove(10)

    print("List after removals:")
    print(" ".join(str(value) for value in items))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())