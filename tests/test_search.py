import pytest

from jsarray import JSArray
from jsarray.exceptions import ArgumentTypeError


def test_at_positive_and_negative(letters):
    assert letters.at(1) == "a"
    assert letters.at(5) == "e"
    assert letters.at(-1) == "e"
    assert letters.at(-5) == "a"


@pytest.mark.parametrize("index", [0, 6, -6, 100])
def test_at_out_of_range_is_none(letters, index):
    assert letters.at(index) is None


def test_at_floors_fractions(letters):
    assert letters.at(2.7) == "b"


def test_at_requires_a_number(letters):
    with pytest.raises(ArgumentTypeError, match=r"at\(\): bad argument #1"):
        letters.at("1")


def test_index_of():
    array = JSArray(2, 5, 9, 2)
    assert array.index_of(2) == 1
    assert array.index_of(9) == 3
    assert array.index_of(7) == -1
    assert array.index_of(2, 2) == 4
    assert array.indexOf(2, -1) == 4


def test_index_of_negative_start_clamps_to_first():
    assert JSArray(1, 2, 3).index_of(1, -10) == 1


def test_index_of_start_past_end_misses():
    assert JSArray(1, 2, 3).index_of(3, 4) == -1


def test_last_index_of():
    array = JSArray(2, 5, 9, 2)
    assert array.last_index_of(2) == 4
    assert array.last_index_of(2, 2) == 1
    assert array.lastIndexOf(7) == -1
    assert array.last_index_of(2, -2) == 1
    assert array.last_index_of(2, 100) == 4


def test_last_index_of_before_first_misses():
    array = JSArray(2, 5, 9, 2)
    assert array.last_index_of(2, 0) == -1
    assert array.last_index_of(2, -10) == -1


def test_search_can_find_none_and_falsy_values():
    array = JSArray(1, None, 0, False, "")
    assert array.index_of(None) == 2
    assert array.index_of(0) == 3
    assert array.index_of(False) == 4
    assert array.index_of("") == 5
    assert array.includes(None)


def test_search_is_strict_about_booleans():
    assert JSArray(1, 0).index_of(True) == -1
    assert JSArray(True).index_of(1) == -1


def test_search_compares_containers_by_identity():
    inner = [1]
    array = JSArray([1], inner)
    assert array.index_of(inner) == 2
    assert array.index_of([2]) == -1


def test_includes():
    array = JSArray("a", "b", "c")
    assert array.includes("b")
    assert not array.includes("b", 3)
    assert array.includes("c", -1)
    assert not array.includes("z")


def test_find_and_find_index():
    array = JSArray(5, 12, 8, 130, 44)
    assert array.find(lambda x: x > 10) == 12
    assert array.find_index(lambda x: x > 10) == 2
    assert array.find(lambda x: x > 1000) is None
    assert array.findIndex(lambda x: x > 1000) == -1


def test_find_last_and_find_last_index():
    array = JSArray(5, 12, 8, 130, 44)
    assert array.find_last(lambda x: x > 45) == 130
    assert array.find_last_index(lambda x: x > 45) == 4
    assert array.findLast(lambda x: x < 0) is None
    assert array.findLastIndex(lambda x: x < 0) == -1


def test_predicates_receive_element_index_and_array():
    array = JSArray("x", "y")
    seen = []

    def predicate(element, index, owner):
        seen.append((element, index, owner))
        return False

    array.find(predicate)
    assert seen == [("x", 1, array), ("y", 2, array)]


def test_find_rejects_non_callable():
    with pytest.raises(ArgumentTypeError, match=r"callable expected, got str"):
        JSArray(1).find("nope")


def test_zero_based_positions(zero_based):
    array = JSArray(2, 5, 9, 2)
    assert array.at(0) == 2
    assert array.index_of(2) == 0
    assert array.last_index_of(2) == 3
    assert array.find_index(lambda x: x == 9) == 2
    assert array.index_of(42) == -1


@pytest.mark.parametrize("index", [10**400, -(10**400)])
def test_huge_indices_do_not_overflow(letters, index):
    assert letters.at(index) is None
    assert letters.includes("a", index) is (index < 0)
    assert letters.last_index_of("e", index) == (5 if index > 0 else -1)
