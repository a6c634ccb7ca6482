"""A value that remembers its previous value across assignments."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

__all__ = ["BlockParameter", "BothProxy"]

T = TypeVar("T")


class BlockParameter(Generic[T]):
    """Hold the current and the previous value of a parameter.

    The previous value is updated by :meth:`assign` and only there; the
    in-place operators change the current value alone.
    """

    def __init__(self, value: T) -> None:
        self._current = value
        self._old = value
        self._assignments = 0

    def assign(self, value: T) -> T:
        """Set a new value; the former current value becomes the old one."""
        self._assignments += 1
        self._old = self._current
        self._current = value
        return self._current

    @property
    def value(self) -> T:
        """The current value."""
        return self._current

    @property
    def old(self) -> T:
        """The value before the last assignment."""
        return self._old

    @property
    def changed(self) -> bool:
        """True if the current value differs from the old one."""
        return self._current != self._old

    def both(self) -> BothProxy:
        """Return a proxy whose comparisons must hold for current and old value."""
        return BothProxy(self)

    def exactly_one_assignment(self) -> bool:
        """Check that there was exactly one assignment; resets the counter."""
        result = self._assignments == 1
        self._assignments = 0
        return result

    def no_multiple_assignments(self) -> bool:
        """Check that there was at most one assignment; resets the counter."""
        result = self._assignments <= 1
        self._assignments = 0
        return result

    def __iadd__(self, other: Any) -> BlockParameter[T]:
        self._current = self._current + other
        return self

    def __isub__(self, other: Any) -> BlockParameter[T]:
        self._current = self._current - other
        return self

    def __imul__(self, other: Any) -> BlockParameter[T]:
        self._current = self._current * other
        return self

    def __itruediv__(self, other: Any) -> BlockParameter[T]:
        self._current = self._current / other
        return self

    def __repr__(self) -> str:
        return f"BlockParameter(value={self._current!r}, old={self._old!r})"


class BothProxy:
    """Comparison proxy: a comparison is true only if it holds for both values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, parameter: BlockParameter[Any]) -> None:
        self._parameter = parameter

    def _values(self) -> tuple[Any, Any]:
        return self._parameter.value, self._parameter.old

    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        return all(v == other for v in self._values())

    def __ne__(self, other: object) -> bool:  # type: ignore[override]
        return all(v != other for v in self._values())

    def __lt__(self, other: Any) -> bool:
        return all(v < other for v in self._values())

    def __gt__(self, other: Any) -> bool:
        return all(v > other for v in self._values())

    def __le__(self, other: Any) -> bool:
        return all(v <= other for v in self._values())

    def __ge__(self, other: Any) -> bool:
        return all(v >= other for v in self._values())