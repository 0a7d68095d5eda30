import math
import sys

import pytest

from jsarray.exceptions import ArgumentTypeError
from jsarray.indexing import (
    clamp,
    in_bounds,
    normalize_range,
    range_bound,
    resolve,
    to_integer,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), (2.9, 2), (-1.5, -2), (0, 0), (math.inf, sys.maxsize)],
)
def test_to_integer_floors(value, expected):
    assert to_integer(value, "at", 1) == expected


@pytest.mark.parametrize("value", ["1", None, True, math.nan, [1]])
def test_to_integer_rejects_non_numbers(value):
    with pytest.raises(ArgumentTypeError) as excinfo:
        to_integer(value, "slice", 2)
    assert "slice(): bad argument #2" in str(excinfo.value)


def test_resolve_negative_counts_from_end():
    assert resolve(-1, 5, 1) == 5
    assert resolve(-2, 5, 1) == 4
    assert resolve(-1, 5, 0) == 4
    assert resolve(3, 5, 1) == 3


def test_clamp_and_range_bound():
    assert clamp(0, 5, 1) == 1
    assert clamp(10, 5, 1) == 6
    assert range_bound(-10, 5, 1) == 1
    assert range_bound(-3, 7, 1) == 5


def test_in_bounds():
    assert in_bounds(1, 3, 1)
    assert in_bounds(3, 3, 1)
    assert not in_bounds(4, 3, 1)
    assert not in_bounds(0, 3, 1)
    assert in_bounds(0, 3, 0)


def test_normalize_range_defaults_cover_everything():
    assert normalize_range(None, None, 4, 1, method="slice") == (1, 5)
    assert normalize_range(None, None, 4, 0, method="slice") == (0, 4)


def test_normalize_range_empty_when_end_before_start():
    assert normalize_range(4, 2, 5, 1, method="slice") == (4, 4)


def test_normalize_range_reports_argument_position():
    with pytest.raises(ArgumentTypeError) as excinfo:
        normalize_range(1, "x", 5, 1, method="fill", position=2)
    assert excinfo.value.position == 3


@pytest.mark.parametrize("value", [10**400, -(10**400)])
def test_to_integer_keeps_huge_integers(value):
    assert to_integer(value, "at", 1) == value
