"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from .sequence import ListSequence

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedList(ListSequence[T]):
    """Singly linked list of nodes, each pointing to the next."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        self._require_index(index)
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _render(self) -> str:
        return "".join(f"{item} " for item in self)

    def get(self, index: int) -> Optional[T]:
        if not 0 <= index < self._length:
            return None
        return self._node_at(index).data

    def set(self, index: int, data: T) -> None:
        self._node_at(index).data = data

    def add_first(self, data: T) -> None:
        self.add_at(0, data)

    def add_last(self, data: T) -> None:
        self.add_at(self._length, data)

    def add_at(self, index: int, data: T) -> None:
        self._require_index(index, allow_end=True)
        if index == 0:
            self._head = _Node(data, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(data, previous.next)
        self._length += 1

    def delete_first(self) -> None:
        self._require_items()
        self.delete_at(0)

    def delete_last(self) -> None:
        self._require_items()
        self.delete_at(self._length - 1)

    def delete_at(self, index: int) -> None:
        self._require_index(index)
        if index == 0:
            self._head = self._head.next
        else:
            previous = self._node_at(index - 1)
            previous.next = previous.next.next
        self._length -= 1

    def display(self) -> None:
        """Print each item followed by a space."""
        print(self._render())

    def reverse(self) -> None:
        if self._head is None:
            raise IndexError("cannot reverse an empty list")
        previous: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def contains(self, data: T) -> bool:
        return any(item == data for item in self)