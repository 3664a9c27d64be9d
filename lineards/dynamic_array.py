"""An array that grows as items are added."""

from __future__ import annotations

from typing import Iterator, Optional, TypeVar

from .sequence import Sequence

T = TypeVar("T")


class DynamicArray(Sequence[T]):
    """Unbounded array supporting positional insertion and deletion."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def get(self, index: int) -> Optional[T]:
        return self._items[index] if 0 <= index < len(self._items) else None

    def set(self, index: int, data: T) -> None:
        self._require_index(index)
        self._items[index] = data

    def add_first(self, data: T) -> None:
        self.add_at(0, data)

    def add_last(self, data: T) -> None:
        self.add_at(len(self._items), data)

    def delete_first(self) -> None:
        self._require_items()
        del self._items[0]

    def delete_last(self) -> None:
        self._require_items()
        del self._items[-1]

    def add_at(self, index: int, data: T) -> None:
        self._require_index(index, allow_end=True)
        self._items.insert(index, data)

    def delete_at(self, index: int) -> None:
        self._require_index(index)
        del self._items[index]

    def display(self) -> None:
        """Print the items separated by commas."""
        print(", ".join(str(item) for item in self._items))