"""A bounded stack built on the linked list."""

from __future__ import annotations

from typing import TypeVar

from .linked_list import LinkedList

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class Stack(LinkedList[T]):
    """Bounded container: ``push`` appends at the back, ``pop`` takes from the front."""

    def __init__(self, capacity: int) -> None:
        super().__init__()
        self._capacity = capacity

    def push(self, data: T) -> None:
        """Add ``data``; raise StackOverflowError when the stack is full."""
        if len(self) == self._capacity:
            raise StackOverflowError("Stack overflow")
        self.add_last(data)

    def pop(self) -> T:
        """Remove and return the front item; raise StackUnderflowError when empty."""
        if len(self) <= 0:
            raise StackUnderflowError("No element left!")
        item = self.get(0)
        self.delete_first()
        return item