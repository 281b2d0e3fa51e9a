"""A doubly linked list and the error type shared by core structures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


class ErrorKind(enum.Enum):
    """Kinds of failure reported by core structures."""

    OK = 0
    OUT_OF_BOUNDS = 1
    UNEXPECTED_PARAMETER = 2


class ZlispError(Exception):
    """An error carrying an ErrorKind and a message."""

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message or kind.name)
        self.kind = kind
        self.message = message


@dataclass(eq=False)
class Node:
    """A list node linking to its neighbours."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A doubly linked list with head and tail pointers."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._len = 0

    def push(self, data: Any) -> Node:
        """Append ``data`` at the tail and return its node."""
        node = Node(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._len += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise ZlispError(ErrorKind.OUT_OF_BOUNDS, f"index {index} out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node.data
        raise ZlispError(ErrorKind.OUT_OF_BOUNDS, f"index {index} out of range")