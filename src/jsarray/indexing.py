"""
Index normalisation shared by every positional method.

Positions are expressed in the configured index base `b`: the first element
sits at `b`, the last at `L - 1 + b`. Negative indices count back from the
end, so `-1` is always the last element. Ranges are half-open `[start, end)`.
"""

from __future__ import annotations

import math
import sys
from numbers import Integral
from typing import Any

from .utils import ensure_number


def to_integer(value: Any, method: str, position: int) -> int:
    """Validates a numeric argument and floors it to an integer."""
    number = ensure_number(value, method, position)
    if isinstance(number, Integral):
        return int(number)
    if math.isinf(number):
        return sys.maxsize if number > 0 else -sys.maxsize
    return math.floor(number)


def resolve(index: int, length: int, base: int) -> int:
    """Maps a negative offset from the end onto a position."""
    if index < 0:
        return length + index + base
    return index


def clamp(position: int, length: int, base: int) -> int:
    """Clamps a position into the range boundaries `[b, L + b]`."""
    return max(base, min(position, length + base))


def range_bound(index: int, length: int, base: int) -> int:
    return clamp(resolve(index, length, base), length, base)


def in_bounds(position: int, length: int, base: int) -> bool:
    return base <= position < length + base


def normalize_range(
    start: Any,
    end: Any,
    length: int,
    base: int,
    *,
    method: str,
    position: int = 1,
) -> tuple[int, int]:
    """
    Resolves optional `start`/`end` arguments into a half-open range.

    `start` defaults to the first element and `end` to one past the last. The
    returned end is never smaller than the start, so an empty range is
    `(start, start)`.
    """
    first = base if start is None else range_bound(
        to_integer(start, method, position), length, base
    )
    last = length + base if end is None else range_bound(
        to_integer(end, method, position + 1), length, base
    )
    return first, max(first, last)
