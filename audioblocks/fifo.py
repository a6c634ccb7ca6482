"""Single-reader, single-writer first-in-first-out queue on a ring buffer."""

from __future__ import annotations

from typing import Any

from audioblocks.mathtools import next_power_of_2

__all__ = ["LockFreeFifo"]


class LockFreeFifo:
    """A ring-buffer FIFO queue for one producer and one consumer thread.

    One thread may :meth:`push` items while another one may :meth:`pop` them.
    The buffer size is rounded up to the next power of 2; one slot always
    stays free, so it holds at most ``size - 1`` items.
    """

    def __init__(self, size: int) -> None:
        self._size = next_power_of_2(size)
        self._mask = self._size - 1
        self._data: list[Any] = [None] * self._size
        self._write_index = 0
        self._read_index = 0

    def push(self, item: Any) -> bool:
        """Add ``item`` to the queue.

        Returns False (without adding) if the queue is full or ``item`` is None.
        """
        if item is None:
            return False
        r = self._read_index
        w = self._write_index
        if w < r:
            w += self._size
        if w - r > self._size - 2:
            return False
        self._data[w & self._mask] = item
        self._write_index = (w + 1) & self._mask
        return True

    def pop(self) -> Any:
        """Remove and return the oldest item, or None if the queue is empty."""
        if self.empty():
            return None
        r = self._read_index
        item = self._data[r]
        self._read_index = (r + 1) & self._mask
        return item

    def empty(self) -> bool:
        """Return True if there is nothing to pop."""
        return self._read_index == self._write_index

    def __repr__(self) -> str:
        return f"LockFreeFifo(size={self._size})"