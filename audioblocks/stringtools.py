"""Conversions between strings and values, including time strings in seconds."""

from __future__ import annotations

import re
from typing import Any, TypeVar, Union

__all__ = ["to_string", "parse", "parse_or", "string_to_time"]

T = TypeVar("T")

# Characters treated as whitespace by the C locale.
_WS = " \t\n\v\f\r"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_SUPPORTED_KINDS = (bool, int, float, str)


def to_string(value: Any) -> str:
    """Convert a value to its string form.

    Booleans become ``"true"`` or ``"false"``; floats use six significant
    digits, like the default stream formatting.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _convert(text: str, kind: type) -> Any:
    """Convert the whole of ``text`` (surrounding whitespace aside) or return None."""
    stripped = text.strip(_WS)
    if kind is bool:
        if _INT_RE.fullmatch(stripped):
            number = int(stripped)
            if number in (0, 1):
                return bool(number)
            return None
        if stripped == "true":
            return True
        if stripped == "false":
            return False
        return None
    if kind is int:
        return int(stripped) if _INT_RE.fullmatch(stripped) else None
    if kind is float:
        return float(stripped) if _FLOAT_RE.fullmatch(stripped) else None
    raise TypeError(f"Unsupported target type: {kind!r}")


def parse(text: str, kind: type[T]) -> T:
    """Convert ``text`` to ``kind`` (``bool``, ``int``, ``float`` or ``str``).

    Leading and trailing whitespace is allowed, anything else is not.
    Booleans accept ``"1"``, ``"0"``, ``"true"`` and ``"false"``.

    :raises ValueError: if ``text`` cannot be converted.
    :raises TypeError: if ``kind`` is not supported.
    """
    if kind is str:
        return text  # type: ignore[return-value]
    value = _convert(text, kind)
    if value is None:
        raise ValueError(f'Couldn\'t convert "{text}" to {kind.__name__}!')
    return value


def _kind_of(default: Any) -> type:
    for kind in _SUPPORTED_KINDS:
        if isinstance(default, kind):
            return kind
    raise TypeError(f"Unsupported default type: {type(default)!r}")


def parse_or(text: str, default: T) -> T:
    """Convert ``text`` to the type of ``default``; return ``default`` on failure."""
    kind = _kind_of(default)
    try:
        return parse(text, kind)
    except ValueError:
        return default


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WS:
        pos += 1
    return pos


def _read_number(text: str, pos: int, kind: type) -> tuple[Any, int]:
    pattern = _INT_RE if kind is int else _FLOAT_RE
    match = pattern.match(text, pos)
    if match is None:
        return None, pos
    return kind(match.group()), match.end()


def _read_digits(text: str, pos: int, count: int) -> tuple[int | None, int]:
    chunk = text[pos:pos + count]
    if len(chunk) != count or not all("0" <= ch <= "9" for ch in chunk):
        return None, pos
    return int(chunk), pos + count


def _expect_colon(text: str, pos: int) -> int | None:
    if pos < len(text) and text[pos] == ":":
        return pos + 1
    return None


def _parse_plain_time(text: str, kind: type) -> Any:
    pos = _skip_ws(text, 0)
    number, pos = _read_number(text, pos, kind)
    if number is None:
        return None
    pos = _skip_ws(text, pos)
    if pos == len(text):
        return number

    end = pos
    while end < len(text) and text[end] not in _WS:
        end += 1
    suffix = text[pos:end]
    if _skip_ws(text, end) != len(text):
        return None

    if suffix == "h":
        return number * 60 * 60
    if suffix == "min":
        return number * 60
    if suffix == "s":
        return number
    if suffix == "ms":
        if kind is int:
            if number % 1000:
                return None
            return number // 1000
        if number / 1000 * 1000 != number:
            return None
        return number / 1000
    return None


def _parse_clock_time(text: str, kind: type, colons: int) -> Any:
    pos = _skip_ws(text, 0)
    negative = False
    if pos < len(text) and text[pos] == "-":
        pos += 1
        negative = True

    hours = 0
    if colons == 1:
        minutes, pos = _read_number(text, _skip_ws(text, pos), int)
        if minutes is None or not 0 <= minutes <= 59:
            return None
    else:
        hours, pos = _read_number(text, _skip_ws(text, pos), int)
        if hours is None:
            return None
        colon_end = _expect_colon(text, pos)
        if colon_end is None:
            return None
        minutes, pos = _read_digits(text, colon_end, 2)
        if minutes is None:
            return None
        if hours < 0 or minutes > 59:
            return None

    colon_end = _expect_colon(text, pos)
    if colon_end is None:
        return None
    whole_seconds, pos = _read_digits(text, colon_end, 2)
    if whole_seconds is None or whole_seconds > 59:
        return None

    fraction = kind(0)
    if text.startswith(".", pos):
        fraction, pos = _read_number(text, pos, kind)
        if fraction is None:
            return None

    if _skip_ws(text, pos) != len(text):
        return None

    rest = kind(whole_seconds) + fraction
    if rest >= 60:
        return None

    if negative:
        hours, minutes, rest = -hours, -minutes, -rest

    return kind(hours * 60 * 60) + kind(minutes * 60) + rest


def string_to_time(text: str, kind: type = float) -> Union[int, float]:
    """Convert a time string to a number of seconds.

    Accepted forms are ``"h:mm:ss.x"``, ``"m:ss.x"``, a number followed by one
    of the units ``h``, ``min``, ``s`` or ``ms``, or a plain number of seconds.
    Times may be negative and surrounded by whitespace. With ``kind=int`` the
    result must be a whole number of seconds.

    :raises ValueError: if ``text`` is not a valid time string.
    :raises TypeError: if ``kind`` is neither ``int`` nor ``float``.
    """
    if kind not in (int, float):
        raise TypeError(f"Unsupported result type: {kind!r}")

    # A colon in the very first position is not counted.
    colons = text.count(":", 1)
    if colons == 0:
        seconds = _parse_plain_time(text, kind)
    elif colons in (1, 2):
        seconds = _parse_clock_time(text, kind, colons)
    else:
        seconds = None

    if seconds is None:
        raise ValueError(f'Invalid time string: "{text}"')
    return kind(seconds)