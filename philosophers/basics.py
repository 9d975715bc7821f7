"""Small helpers: lenient integer parsing and a millisecond clock."""

from __future__ import annotations

import itertools
import time

_WHITESPACE = " \t\n\v\f\r"
_INT_RANGE = 1 << 32
_INT_MIN = -(1 << 31)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the lenient way.

    Leading whitespace is skipped, one optional sign is accepted and the
    digits that follow are read up to the first non-digit. Text without
    digits gives 0. The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(itertools.takewhile(_is_ascii_digit, rest))
    value = sign * int(digits) if digits else 0
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000