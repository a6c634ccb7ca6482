"""Block-based delay lines: write one block at a time, read with any delay."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

__all__ = ["BlockDelayLine", "NonCausalBlockDelayLine"]


class BlockDelayLine:
    """A "write once, read many times" delay line working on blocks of samples.

    Writing is simple and fast; the desired delay (in samples) is given when
    reading. Delays from 0 up to ``max_delay`` are valid.
    """

    def __init__(self, block_size: int, max_delay: int) -> None:
        if block_size < 1:
            raise ValueError("block_size must be at least 1")
        if max_delay < 0:
            raise ValueError("max_delay must not be negative")
        self._block_size = block_size
        self._max_delay = max_delay
        # At least two blocks, otherwise reading a full block at delay 0 would
        # wrap onto itself.
        self._number_of_blocks = max(
            2, (max_delay + 2 * block_size - 1) // block_size)
        self._data: list[float] = [0.0] * (self._number_of_blocks * block_size)
        self._position = 0  # index of the sample with time 0

    @property
    def block_size(self) -> int:
        """Number of samples per block."""
        return self._block_size

    @property
    def max_delay(self) -> int:
        """Largest valid delay in samples."""
        return self._max_delay

    def delay_is_valid(self, delay: int) -> bool:
        """Return True if ``delay`` lies between 0 and ``max_delay``."""
        return 0 <= delay <= self._max_delay

    def corrected_delay(self, delay: int) -> int:
        """Return ``delay`` if it is valid, otherwise the maximum delay."""
        return delay if self.delay_is_valid(delay) else self._max_delay

    def advance(self) -> None:
        """Move the read and write positions on to the next block."""
        self._position = (self._position + self._block_size) % len(self._data)

    def _take_block(self, source: Iterable[float]) -> list[float]:
        block = list(islice(source, self._block_size))
        if len(block) != self._block_size:
            raise ValueError(
                f"source holds {len(block)} samples, "
                f"{self._block_size} are needed")
        return block

    def write_current(self, source: Iterable[float]) -> None:
        """Write one block at the current write position without advancing.

        Call :meth:`advance` before each block written this way.
        """
        block = self._take_block(source)
        start = self._position
        self._data[start:start + self._block_size] = block

    def write_block(self, source: Iterable[float]) -> None:
        """Advance to the next block, then write ``block_size`` samples from ``source``.

        :raises ValueError: if ``source`` holds fewer than ``block_size`` samples.
        """
        block = self._take_block(source)
        self.advance()
        start = self._position
        self._data[start:start + self._block_size] = block

    def read_samples(self, delay: int = 0) -> Iterator[float]:
        """Yield samples endlessly, starting at the one delayed by ``delay``.

        The delay is not checked; the iteration wraps around the storage.
        """
        length = len(self._data)
        index = (self._position - delay) % length
        while True:
            yield self._data[index]
            index = (index + 1) % length

    def read_block(self, delay: int, weight: float | None = None) -> list[float]:
        """Return one block delayed by ``delay`` samples, optionally scaled by ``weight``.

        :raises ValueError: if ``delay`` is not valid.
        """
        if not self.delay_is_valid(delay):
            raise ValueError(
                f"delay {delay} is outside the valid range 0..{self._max_delay}")
        samples = islice(self.read_samples(delay), self._block_size)
        if weight is None:
            return list(samples)
        return [sample * weight for sample in samples]

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(block_size={self._block_size}, "
                f"max_delay={self._max_delay})")


class NonCausalBlockDelayLine:
    """A block delay line that also allows negative delays.

    Everything is delayed by ``initial_delay``; a negative delay can be at most
    as large (in magnitude) as the initial delay.
    """

    def __init__(self, block_size: int, max_delay: int,
                 initial_delay: int) -> None:
        if initial_delay < 0:
            raise ValueError("initial_delay must not be negative")
        self._line = BlockDelayLine(block_size, max_delay + initial_delay)
        self._initial_delay = initial_delay
        self._max_delay = max_delay

    @property
    def block_size(self) -> int:
        """Number of samples per block."""
        return self._line.block_size

    @property
    def initial_delay(self) -> int:
        """The additional delay that makes negative delays possible."""
        return self._initial_delay

    @property
    def max_delay(self) -> int:
        """Largest valid delay in samples."""
        return self._max_delay

    def delay_is_valid(self, delay: int) -> bool:
        """Return True if ``-initial_delay <= delay <= max_delay``."""
        if delay < -self._initial_delay:
            return False
        return self._line.delay_is_valid(delay + self._initial_delay)

    def corrected_delay(self, delay: int) -> int:
        """Return ``delay`` if valid, otherwise the nearest limit."""
        if delay < -self._initial_delay:
            return -self._initial_delay
        return (self._line.corrected_delay(delay + self._initial_delay)
                - self._initial_delay)

    def advance(self) -> None:
        """Move the read and write positions on to the next block."""
        self._line.advance()

    def write_block(self, source: Iterable[float]) -> None:
        """Advance to the next block, then write one block from ``source``."""
        self._line.write_block(source)

    def write_current(self, source: Iterable[float]) -> None:
        """Write one block at the current write position without advancing."""
        self._line.write_current(source)

    def read_block(self, delay: int, weight: float | None = None) -> list[float]:
        """Return one block delayed by ``delay`` samples, optionally scaled.

        :raises ValueError: if ``delay`` is not valid.
        """
        if not self.delay_is_valid(delay):
            raise ValueError(
                f"delay {delay} is outside the valid range "
                f"{-self._initial_delay}..{self._max_delay}")
        return self._line.read_block(delay + self._initial_delay, weight)

    def read_samples(self, delay: int = 0) -> Iterator[float]:
        """Yield samples endlessly, starting at the one delayed by ``delay``.

        The delay is not checked.
        """
        return self._line.read_samples(delay + self._initial_delay)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(block_size={self.block_size}, "
                f"max_delay={self._max_delay}, "
                f"initial_delay={self._initial_delay})")