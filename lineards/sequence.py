"""Abstract interfaces shared by the linear data structures."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Sequence(ABC, Generic[T]):
    """A positional container that grows and shrinks at either end or in the middle.

    Failed operations raise: ``IndexError`` for a bad position or an empty
    container, ``OverflowError`` when a bounded container is full.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored items."""

    def __iter__(self) -> Iterator[T]:
        for index in range(len(self)):
            yield self.get(index)

    @abstractmethod
    def get(self, index: int) -> Optional[T]:
        """Return the item at ``index``, or ``None`` when out of range."""

    @abstractmethod
    def set(self, index: int, data: T) -> None:
        """Replace the item at ``index``."""

    @abstractmethod
    def add_first(self, data: T) -> None:
        """Insert ``data`` at the front."""

    @abstractmethod
    def add_last(self, data: T) -> None:
        """Append ``data`` at the back."""

    @abstractmethod
    def delete_first(self) -> None:
        """Remove the front item."""

    @abstractmethod
    def delete_last(self) -> None:
        """Remove the back item."""

    @abstractmethod
    def add_at(self, index: int, data: T) -> None:
        """Insert ``data`` so that it ends up at ``index``."""

    @abstractmethod
    def delete_at(self, index: int) -> None:
        """Remove the item at ``index``."""

    def display(self) -> str:
        """Write the items to standard output and return the written line."""
        text = self._render()
        sys.stdout.write(text + "\n")
        return text

    def _render(self) -> str:
        return ", ".join(str(item) for item in self)

    def _require_index(self, index: int, *, allow_end: bool = False) -> None:
        limit = len(self) + (1 if allow_end else 0)
        if not 0 <= index < limit:
            raise IndexError(f"index {index} out of range")

    def _require_items(self) -> None:
        if not len(self):
            raise IndexError(f"{type(self).__name__} is empty")


class ListSequence(Sequence[T]):
    """A sequence that can also be reversed in place and searched."""

    @abstractmethod
    def reverse(self) -> None:
        """Reverse the order of the items in place."""

    @abstractmethod
    def contains(self, data: T) -> bool:
        """Return whether an item equal to ``data`` is stored."""