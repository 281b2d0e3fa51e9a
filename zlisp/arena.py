"""A bump allocator over a fixed buffer, and an allocator description."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class Allocator:
    """A set of allocation callbacks sharing one state object."""

    allocator: Callable[[Any, int], Any]
    deallocator: Callable[[Any, Any], None]
    reallocator: Callable[[Any, Any, int], Any]
    init: Optional[Callable[[Any], Any]] = None
    destroy: Optional[Callable[[Any], None]] = None
    state: Any = None


class Arena:
    """Hands out consecutive slices of one fixed-size buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: Optional[bytearray] = bytearray(capacity)
        self.capacity = capacity
        self.used = 0

    def allocate(self, block_size: int) -> memoryview:
        """Reserve ``block_size`` bytes and return a view onto them."""
        if block_size < 0:
            raise ValueError("block size must not be negative")
        if self._data is None or self.capacity == 0:
            raise MemoryError("arena has no storage")
        if self.used + block_size >= self.capacity:
            raise MemoryError(
                f"arena exhausted: {self.used} of {self.capacity} bytes used, "
                f"{block_size} requested"
            )
        view = memoryview(self._data)[self.used:self.used + block_size]
        self.used += block_size
        return view

    def destroy(self) -> None:
        """Release the buffer; later allocations fail."""
        self._data = None
        self.capacity = 0
        self.used = 0

    def __enter__(self) -> "Arena":
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()