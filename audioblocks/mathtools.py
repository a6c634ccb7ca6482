"""Mathematical helpers for audio processing: levels, angles, wrapping, statistics."""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real

__all__ = [
    "square",
    "db2linear",
    "linear2db",
    "deg2rad",
    "rad2deg",
    "wrap",
    "wrap_two_pi",
    "next_power_of_2",
    "max_amplitude",
    "rms",
    "has_only_zeros",
    "RaisedCosine",
    "LinearInterpolator",
]

_PI_DIV_180 = math.pi / 180


def square(x):
    """Return ``x`` multiplied by itself."""
    return x * x


def db2linear(level: float, power: bool = False) -> float:
    """Convert a level in decibel to a linear gain factor.

    With ``power`` a factor of 10 is used, otherwise 20.
    """
    factor = 10.0 if power else 20.0
    return 10.0 ** (level / factor)


def linear2db(x: float, power: bool = False) -> float:
    """Convert a linear gain factor to a level in decibel.

    Returns ``-inf`` for zero and ``nan`` for negative input.
    """
    factor = 10.0 if power else 20.0
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return factor * math.log10(x)


def deg2rad(angle: float) -> float:
    """Convert an angle from degrees to radians."""
    return angle * _PI_DIV_180


def rad2deg(angle: float) -> float:
    """Convert an angle from radians to degrees."""
    return angle / _PI_DIV_180


def _truncated_remainder(x: int, full: int) -> int:
    remainder = abs(x) % abs(full)
    return -remainder if x < 0 else remainder


def wrap(x, full):
    """Wrap ``x`` into the interval ``[0, full)``.

    Integers use a truncating remainder, floats use ``math.fmod``; a negative
    remainder is shifted up by ``full``.
    """
    if isinstance(x, int) and isinstance(full, int):
        result = _truncated_remainder(x, full)
    else:
        result = math.fmod(x, full)
    if result < 0:
        result += full
    return result


def wrap_two_pi(x: float) -> float:
    """Wrap an angle in radians into ``[0, 2*pi)``."""
    return wrap(float(x), 2 * math.pi)


def next_power_of_2(number):
    """Return the smallest power of 2 that is ``>= number`` (1 for ``number <= 1``)."""
    power_of_2 = 1
    while power_of_2 < number:
        power_of_2 *= 2
    return power_of_2


def max_amplitude(values: Iterable[Real]):
    """Return the largest absolute value in ``values`` (0 if empty)."""
    result = 0
    for value in values:
        result = max(result, abs(value))
    return result


def rms(values: Iterable[Real]) -> float:
    """Return the root mean square of ``values`` (``nan`` if empty)."""
    total = 0.0
    count = 0
    for value in values:
        total += value * value
        count += 1
    if count == 0:
        return math.nan
    return math.sqrt(total / count)


def has_only_zeros(values: Iterable[Real]) -> bool:
    """Return True if every value is zero; stops at the first non-zero value."""
    return all(value == 0 for value in values)


class RaisedCosine:
    """Raised cosine with a given period; results range from 0 to 1."""

    def __init__(self, period: float = 0.0) -> None:
        self._period = period

    @property
    def period(self) -> float:
        return self._period

    def __call__(self, x: float) -> float:
        return math.cos(x * 2 * math.pi / self._period) * 0.5 + 0.5

    def __repr__(self) -> str:
        return f"RaisedCosine(period={self._period!r})"


class LinearInterpolator:
    """Linear interpolation from ``first`` (at 0) to ``last`` (at ``length``)."""

    def __init__(self, first: float = 0.0, last: float | None = None,
                 length: float = 1) -> None:
        self._first = 0.0
        self._increment = 0.0
        self.set(first, first if last is None else last, length)

    def set(self, first: float, last: float, length: float = 1) -> None:
        """Set the range and the length of the interpolation interval."""
        self._first = first
        self._increment = (last - first) / length

    def __call__(self, x: float) -> float:
        return self._first + x * self._increment

    def __repr__(self) -> str:
        return (f"LinearInterpolator(first={self._first!r}, "
                f"increment={self._increment!r})")