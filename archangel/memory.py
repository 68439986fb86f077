"""A fixed-size bump allocator."""

from __future__ import annotations


class Memory:
    """A linear arena handing out consecutive slices of one buffer."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("arena size must not be negative")
        self.data = bytearray(size)
        self.size = size
        self.top = 0

    def alloc(self, size: int) -> memoryview:
        """Reserve ``size`` bytes; raises MemoryError if the arena is full."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if self.top + size > self.size:
            raise MemoryError(
                f"cannot allocate {size} bytes: {self.available()} available"
            )
        view = memoryview(self.data)[self.top : self.top + size]
        self.top += size
        return view

    def used(self) -> int:
        return self.top

    def available(self) -> int:
        return self.size - self.top