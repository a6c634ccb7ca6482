"""Containers that never change size after setup: vector, list and matrix."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

__all__ = [
    "FixedVector",
    "FixedList",
    "FixedMatrix",
    "distribute_list",
    "undistribute_list",
]

T = TypeVar("T")


def _check_index(index: int, length: int) -> int:
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise IndexError("index out of range")
    return index


class FixedVector(Generic[T]):
    """A sequence whose storage is allocated once and never re-allocated.

    The size is normally fixed on construction. A vector created empty may be
    given its storage later, exactly once, with :meth:`reserve` (then filled
    with :meth:`append`) or with :meth:`resize`.
    """

    def __init__(self, size: int | Iterable[T] = 0,
                 factory: Callable[[], T] | None = None) -> None:
        self._factory = factory
        if isinstance(size, int):
            if size < 0:
                raise ValueError("size must not be negative")
            self._items: list[Any] = [self._make() for _ in range(size)]
        else:
            self._items = list(size)
        self._capacity = len(self._items)

    def _make(self) -> Any:
        return None if self._factory is None else self._factory()

    def reserve(self, n: int) -> None:
        """Reserve room for ``n`` elements; only allowed while capacity is 0."""
        if self._capacity != 0:
            raise RuntimeError("reserve() is only allowed if capacity == 0")
        if n < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = n

    def resize(self, n: int) -> None:
        """Create ``n`` elements with the factory; only allowed while capacity is 0."""
        if self._capacity != 0:
            raise RuntimeError("resize() is only allowed if capacity == 0")
        if n < 0:
            raise ValueError("size must not be negative")
        self._items = [self._make() for _ in range(n)]
        self._capacity = n

    def append(self, item: T) -> None:
        """Add an element at the end; only allowed while size < capacity."""
        if len(self._items) >= self._capacity:
            raise RuntimeError("append() is only allowed if size < capacity")
        self._items.append(item)

    @property
    def capacity(self) -> int:
        """The number of elements the storage has room for."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            positions = range(*index.indices(len(self._items)))
            values = list(value)
            if len(values) != len(positions):
                raise ValueError("slice assignment must not change the size")
            for position, item in zip(positions, values):
                self._items[position] = item
        else:
            self._items[_check_index(index, len(self._items))] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedVector({self._items!r}, capacity={self._capacity})"


class FixedList(Generic[T]):
    """A list whose elements cannot be added or removed, only re-ordered."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def _position(self, index: int, allow_end: bool) -> int:
        length = len(self._items)
        if index < 0:
            index += length
        upper = length if allow_end else length - 1
        if not 0 <= index <= upper:
            raise IndexError("index out of range")
        return index

    def move(self, source: int, target: int) -> None:
        """Move the element at ``source`` in front of the element at ``target``.

        ``target`` may equal the length of the list to move to the end.
        """
        source = self._position(source, allow_end=False)
        target = self._position(target, allow_end=True)
        item = self._items.pop(source)
        if source < target:
            target -= 1
        self._items.insert(target, item)

    def move_range(self, first: int, last: int, target: int) -> None:
        """Move the elements ``[first, last)`` in front of ``target``."""
        first = self._position(first, allow_end=True)
        last = self._position(last, allow_end=True)
        target = self._position(target, allow_end=True)
        if first > last:
            raise ValueError("first must not be behind last")
        if first < target < last:
            raise ValueError("target must not lie inside the moved range")
        chunk = self._items[first:last]
        del self._items[first:last]
        if target >= last:
            target -= len(chunk)
        self._items[target:target] = chunk

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def sort(self, key: Callable[[T], Any] | None = None) -> None:
        """Sort the elements in place (stable)."""
        self._items.sort(key=key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[_check_index(index, len(self._items))]

    def __repr__(self) -> str:
        return f"FixedList({self._items!r})"


class _StridedView(Sequence):
    """A writable window into a flat list: ``length`` items, ``step`` apart."""

    __slots__ = ("_data", "_start", "_step", "_length")

    def __init__(self, data: list, start: int, step: int, length: int) -> None:
        self._data = data
        self._start = start
        self._step = step
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._length))]
        index = _check_index(index, self._length)
        return self._data[self._start + index * self._step]

    def __setitem__(self, index: int, value: Any) -> None:
        index = _check_index(index, self._length)
        self._data[self._start + index * self._step] = value

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._length):
            yield self._data[self._start + i * self._step]

    def __repr__(self) -> str:
        return f"[{', '.join(repr(v) for v in self)}]"


class FixedMatrix:
    """Two-dimensional storage with channel-wise and slice-wise access.

    Channels are stored contiguously; a slice holds the element at the same
    position of every channel.
    """

    def __init__(self, channels: int = 0, slices: int = 0) -> None:
        self._data: list[float] = []
        self._channels: tuple[_StridedView, ...] = ()
        self._slices: tuple[_StridedView, ...] = ()
        self.initialize(channels, slices)

    def initialize(self, channels: int, slices: int) -> None:
        """Allocate ``channels`` x ``slices`` zeros; only allowed while empty."""
        if self._data:
            raise RuntimeError("initialize() is only allowed on an empty matrix")
        if channels < 0 or slices < 0:
            raise ValueError("dimensions must not be negative")
        self._data = [0.0] * (channels * slices)
        self._channels = tuple(
            _StridedView(self._data, c * slices, 1, slices)
            for c in range(channels))
        self._slices = tuple(
            _StridedView(self._data, s, slices, channels)
            for s in range(slices))

    @property
    def channels(self) -> tuple[_StridedView, ...]:
        """Writable views of the channels."""
        return self._channels

    @property
    def slices(self) -> tuple[_StridedView, ...]:
        """Writable views of the slices."""
        return self._slices

    def set_channels(self, rows: Iterable[Iterable[float]]) -> None:
        """Copy ``rows`` into the channels; passing another matrix's slices transposes it.

        :raises ValueError: if the dimensions don't match.
        """
        rows = [list(row) for row in rows]
        if len(rows) != len(self._channels):
            raise ValueError("number of rows doesn't match number of channels")
        for row, channel in zip(rows, self._channels):
            if len(row) != len(channel):
                raise ValueError("row length doesn't match channel length")
        for row, channel in zip(rows, self._channels):
            for position, value in enumerate(row):
                channel[position] = value

    @property
    def data(self) -> list[float]:
        """The underlying flat storage, channel after channel."""
        return self._data

    def __repr__(self) -> str:
        return f"FixedMatrix({[list(c) for c in self._channels]!r})"


def distribute_list(source: list, targets: Iterable[Any], member: str) -> None:
    """Move each element of ``source`` to the end of ``member`` of the matching target.

    :raises ValueError: if ``source`` and ``targets`` differ in size.
    """
    targets = list(targets)
    if len(source) != len(targets):
        raise ValueError("distribute_list: Different sizes!")
    for item, target in zip(source, targets):
        getattr(target, member).append(item)
    source.clear()


def undistribute_list(source: Iterable[Any], targets: Iterable[Any],
                      member: str, garbage: list) -> None:
    """Remove each element of ``source`` from ``member`` of the matching target.

    Removed elements are appended to ``garbage``. On error the earlier
    removals are not undone.

    :raises ValueError: if the sizes differ or an element is not found.
    """
    source = list(source)
    targets = list(targets)
    if len(source) != len(targets):
        raise ValueError("undistribute_list(): Different sizes!")
    for item, target in zip(source, targets):
        container = getattr(target, member)
        try:
            position = container.index(item)
        except ValueError:
            raise ValueError("undistribute_list(): Element not found!") from None
        garbage.append(container.pop(position))