"""A growable list that refuses empty elements."""

from __future__ import annotations

from typing import Any, Iterator


class GrowableList:
    """An ordered, appendable stack of non-None elements."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def append(self, elem: Any) -> None:
        """Add ``elem`` at the end; None is rejected."""
        if elem is None:
            raise ValueError("cannot append None")
        self._items.append(elem)

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]