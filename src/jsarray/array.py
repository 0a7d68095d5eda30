from __future__ import annotations

import functools
from collections.abc import Iterator
from numbers import Number
from typing import Any

from typing_extensions import override

from . import presenters
from .config import config
from .exceptions import ArgumentTypeError, EmptyReduceError, RangeError
from .indexing import (
    in_bounds,
    normalize_range,
    range_bound,
    resolve,
    to_integer,
)
from .log import logger
from .protocols import Callback, Comparator, is_array
from .structures import MutableSequenceMixin
from .utils import (
    MISSING,
    adapt_callback,
    elements_of,
    ensure_callable,
    ensure_number,
    is_empty_container,
    required,
    strictly_equal,
)


class JSArray(MutableSequenceMixin[Any]):
    """
    A list with the JavaScript `Array` method set.

    The JavaScript-style methods address elements by position in the configured
    index base (1 by default, see `ArrayConfig.index_base`) and accept negative
    positions counted from the end. The Python protocol (`arr[i]`, `len`,
    iteration) keeps native 0-based indexing.

    Assigning a `JSArray` to another name aliases it. Methods that return a new
    array never share storage with the receiver. Mutating an array while one of
    its `entries()`/`keys()`/`values()` generators is live is allowed but the
    generator then observes the mutation.
    """

    def __init__(self, *elements: Any, items: list[Any] | None = None):
        if elements and items is not None:
            raise TypeError("JSArray() takes either elements or items=, not both")
        self._items: list[Any] = items if items is not None else list(elements)

    @property
    @override
    def _datastore(self) -> list[Any]:
        return self._items

    @property
    def _base(self) -> int:
        return config().index_base

    @property
    def length(self) -> int:
        return len(self._items)

    def get_length(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def of(cls, *elements: Any) -> JSArray:
        """Creates an array from the arguments, whatever their number or type."""
        return cls(*elements)

    @classmethod
    def from_(cls, source: Any, map_fn: Callback | None = None) -> JSArray:
        """
        Creates an array from a string or a sequence-like value.

        Strings yield one element per character. Sequence-like values are copied
        element by element, passing each through `map_fn(element, index)` when
        given. Any other source yields an empty array; only `None` is rejected.
        """
        source = required(source, "from_(): argument #1 must not be None")
        if map_fn is not None:
            map_fn = adapt_callback(ensure_callable(map_fn, "from_", 2))

        if isinstance(source, str):
            elements = list(source)
        elif is_array(source):
            elements = elements_of(source)
        else:
            logger().debug(
                f"from_(): unsupported source type {type(source).__name__}, "
                "returning an empty array"
            )
            return cls()

        if map_fn is not None:
            base = config().index_base
            elements = [
                map_fn(element, index) for index, element in enumerate(elements, base)
            ]
        return cls(items=elements)

    def _new(self, items: list[Any]) -> JSArray:
        return type(self)(items=items)

    def _walk(self, reverse: bool = False) -> Iterator[tuple[int, Any]]:
        """Yields (position, element), re-reading the storage at every step."""
        base = self._base
        offsets = range(len(self._items))
        for offset in reversed(offsets) if reverse else offsets:
            if offset < len(self._items):
                yield offset + base, self._items[offset]

    def _callback(self, callback: Any, method: str, fallback: int = 1) -> Callback:
        return adapt_callback(ensure_callable(callback, method, 1), fallback)

    # ------------------------------------------------------------------ #
    # Access & search
    # ------------------------------------------------------------------ #

    def at(self, index: int) -> Any:
        """Returns the element at `index`, or None when out of range."""
        length, base = len(self._items), self._base
        position = resolve(to_integer(index, "at", 1), length, base)
        if in_bounds(position, length, base):
            return self._items[position - base]
        return None

    def index_of(self, target: Any, from_index: int | None = None) -> int:
        """
        Returns the first position holding `target`, or -1.

        A negative `from_index` counts from the end and is clamped to the first
        element.
        """
        return self._search_forward("index_of", target, from_index)

    def includes(self, target: Any, from_index: int | None = None) -> bool:
        return self._search_forward("includes", target, from_index) != -1

    def _search_forward(self, method: str, target: Any, from_index: Any) -> int:
        length, base = len(self._items), self._base
        if from_index is None:
            position = base
        else:
            requested = resolve(to_integer(from_index, method, 2), length, base)
            position = max(base, requested)

        for offset in range(position - base, length):
            if strictly_equal(self._items[offset], target):
                return offset + base
        return -1

    def last_index_of(self, target: Any, from_index: int | None = None) -> int:
        """
        Returns the last position holding `target` at or before `from_index`.

        `from_index` defaults to the last element. A start that resolves before
        the first element finds nothing.
        """
        length, base = len(self._items), self._base
        position = length - 1 + base
        if from_index is not None:
            requested = to_integer(from_index, "last_index_of", 2)
            requested = resolve(requested, length, base)
            position = min(position, requested)

        for offset in range(position - base, -1, -1):
            if strictly_equal(self._items[offset], target):
                return offset + base
        return -1

    def find(self, predicate: Callback) -> Any:
        call = self._callback(predicate, "find")
        for position, element in self._walk():
            if call(element, position, self):
                return element
        return None

    def find_index(self, predicate: Callback) -> int:
        call = self._callback(predicate, "find_index")
        for position, element in self._walk():
            if call(element, position, self):
                return position
        return -1

    def find_last(self, predicate: Callback) -> Any:
        call = self._callback(predicate, "find_last")
        for position, element in self._walk(reverse=True):
            if call(element, position, self):
                return element
        return None

    def find_last_index(self, predicate: Callback) -> int:
        call = self._callback(predicate, "find_last_index")
        for position, element in self._walk(reverse=True):
            if call(element, position, self):
                return position
        return -1

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #

    def map(self, callback: Callback) -> JSArray:
        return self._new(self._map_items(callback, "map"))

    def _map_items(self, callback: Callback, method: str) -> list[Any]:
        call = self._callback(callback, method)
        return [call(element, position, self) for position, element in self._walk()]

    def filter(self, predicate: Callback) -> JSArray:
        call = self._callback(predicate, "filter")
        return self._new(
            [
                element
                for position, element in self._walk()
                if call(element, position, self)
            ]
        )

    def flat(self, depth: float = 1) -> JSArray:
        """
        Returns a new array with nested arrays expanded up to `depth` levels.

        Pass `math.inf` to flatten completely.
        """
        depth = ensure_number(depth, "flat", 1)
        return self._new(_flatten(self._items, depth))

    def flat_map(self, callback: Callback) -> JSArray:
        """
        Maps every element, then flattens the result one level.

        Empty containers returned by the callback are dropped.
        """
        mapped = self._map_items(callback, "flat_map")
        return self._new(
            _flatten([item for item in mapped if not is_empty_container(item)], 1)
        )

    def slice(self, start: int | None = None, end: int | None = None) -> JSArray:
        """Returns a copy of the half-open range `[start, end)`."""
        base = self._base
        first, last = normalize_range(
            start, end, len(self._items), base, method="slice"
        )
        return self._new(self._items[first - base : last - base])

    def concat(self, *values: Any) -> JSArray:
        """
        Returns a new array: this one followed by every value.

        Sequence-like values contribute their elements, anything else is added
        as a single element.
        """
        items = list(self._items)
        for value in values:
            if is_array(value):
                items.extend(elements_of(value))
            else:
                items.append(value)
        return self._new(items)

    def to_reversed(self) -> JSArray:
        return self._new(self._items[::-1])

    def with_(self, index: int, value: Any) -> JSArray:
        """
        Returns a copy with the element at `index` replaced by `value`.

        Raises:
            RangeError: when `index` does not address an existing element.
        """
        length, base = len(self._items), self._base
        requested = to_integer(index, "with_", 1)
        position = resolve(requested, length, base)
        if not in_bounds(position, length, base):
            raise RangeError("with_", requested, length)

        items = list(self._items)
        items[position - base] = value
        return self._new(items)

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def push(self, *items: Any) -> int:
        self._items.extend(items)
        return len(self._items)

    def unshift(self, *items: Any) -> int:
        self._items[0:0] = items
        return len(self._items)

    @override
    def pop(self) -> Any:  # pyright: ignore[reportIncompatibleMethodOverride]
        """Removes and returns the last element, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def shift(self) -> Any:
        """Removes and returns the first element, or None when empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    def fill(
        self, value: Any, start: int | None = None, end: int | None = None
    ) -> JSArray:
        """Overwrites `[start, end)` with `value` and returns this array."""
        base = self._base
        first, last = normalize_range(
            start, end, len(self._items), base, method="fill", position=2
        )
        self._items[first - base : last - base] = [value] * (last - first)
        return self

    def copy_within(
        self, target: int, start: int | None = None, end: int | None = None
    ) -> JSArray:
        """
        Copies `[start, end)` over the elements beginning at `target`.

        The source range is staged before writing, so overlapping ranges copy
        correctly. The length never changes: writes stop at the last element.
        """
        length, base = len(self._items), self._base
        destination = range_bound(to_integer(target, "copy_within", 1), length, base)
        first, last = normalize_range(
            start, end, length, base, method="copy_within", position=2
        )

        copies = self._items[first - base : last - base]
        count = min(len(copies), length + base - destination)
        offset = destination - base
        self._items[offset : offset + count] = copies[:count]
        return self

    def splice(
        self, start: int | None = None, delete_count: Any = MISSING, *items: Any
    ) -> JSArray:
        """
        Removes `delete_count` elements at `start`, inserts `items` there and
        returns the removed elements.

        Omitting `delete_count` removes everything from `start` to the end.
        Calling `splice()` without arguments changes nothing.
        """
        if start is None:
            return self._new([])

        length, base = len(self._items), self._base
        position = range_bound(to_integer(start, "splice", 1), length, base)
        available = length + base - position
        if delete_count is MISSING:
            count = available
        else:
            count = min(max(to_integer(delete_count, "splice", 2), 0), available)

        offset = position - base
        removed = self._items[offset : offset + count]
        self._items[offset : offset + count] = items
        return self._new(removed)

    def sort(self, compare_fn: Comparator | None = None) -> JSArray:
        """
        Sorts in place and returns this array.

        `compare_fn(a, b)` must return a negative number, zero or a positive
        number, as in JavaScript. A boolean less-than such as `lambda a, b: a < b`
        is rejected with `ArgumentTypeError`. Without a comparator, elements are
        ordered with `<`. The sort is stable and leaves the array untouched when
        a comparison raises.
        """
        if compare_fn is None:
            self._items[:] = sorted(self._items)
            return self

        ensure_callable(compare_fn, "sort", 1)

        def compare(a: Any, b: Any) -> float:
            result = compare_fn(a, b)
            if isinstance(result, bool):
                raise ArgumentTypeError(
                    "sort", 1, "comparator returning a number", result
                )
            return result

        self._items[:] = sorted(self._items, key=functools.cmp_to_key(compare))
        return self

    @override
    def reverse(self) -> JSArray:  # pyright: ignore[reportIncompatibleMethodOverride]
        self._items.reverse()
        return self

    # ------------------------------------------------------------------ #
    # Aggregation & iteration
    # ------------------------------------------------------------------ #

    def reduce(self, callback: Callback, initial: Any = MISSING) -> Any:
        """
        Folds the array from left to right with
        `callback(accumulator, element, index, array)`.

        Without `initial`, the first element seeds the accumulator.

        Raises:
            EmptyReduceError: when the array is empty and `initial` is omitted.
        """
        call = self._callback(callback, "reduce", fallback=2)
        return self._fold("reduce", call, initial, reverse=False)

    def reduce_right(self, callback: Callback, initial: Any = MISSING) -> Any:
        call = self._callback(callback, "reduce_right", fallback=2)
        return self._fold("reduce_right", call, initial, reverse=True)

    def _fold(self, method: str, call: Callback, initial: Any, reverse: bool) -> Any:
        walk = self._walk(reverse=reverse)
        if initial is MISSING:
            try:
                _, accumulator = next(walk)
            except StopIteration:
                raise EmptyReduceError(method) from None
        else:
            accumulator = initial

        for position, element in walk:
            accumulator = call(accumulator, element, position, self)
        return accumulator

    def every(self, predicate: Callback) -> bool:
        call = self._callback(predicate, "every")
        return all(call(element, position, self) for position, element in self._walk())

    def some(self, predicate: Callback) -> bool:
        call = self._callback(predicate, "some")
        return any(call(element, position, self) for position, element in self._walk())

    def for_each(self, callback: Callback) -> None:
        call = self._callback(callback, "for_each")
        for position, element in self._walk():
            call(element, position, self)

    def entries(self) -> Iterator[tuple[int, Any]]:
        yield from self._walk()

    def keys(self) -> Iterator[int]:
        for position, _ in self._walk():
            yield position

    def values(self) -> Iterator[Any]:
        for _, element in self._walk():
            yield element

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def join(self, separator: str | None = None) -> str:
        if separator is None:
            separator = config().separator
        elif not isinstance(separator, str):
            raise ArgumentTypeError("join", 1, "str", separator)
        return presenters.join(self, separator)

    def to_string(self) -> str:
        return self.join()

    def value_of(self) -> JSArray:
        return self

    def to_list(self) -> list[Any]:
        return list(self._items)

    # ------------------------------------------------------------------ #
    # Python protocol
    # ------------------------------------------------------------------ #

    @override
    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._new(self._items[index])
        return super().__getitem__(index)

    @override
    def __eq__(self, other: object) -> bool:
        if not is_array(other):
            return NotImplemented
        return self._items == elements_of(other)

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __add__(self, other: Any) -> JSArray:
        if not _concatenable(other):
            return NotImplemented
        return self._new([*self._items, *_operand(other)])

    def __radd__(self, other: Any) -> JSArray:
        if not _concatenable(other):
            return NotImplemented
        return self._new([*_operand(other), *self._items])

    @override
    def __iadd__(self, other: Any) -> JSArray:  # pyright: ignore[reportIncompatibleMethodOverride]
        if not _concatenable(other):
            return NotImplemented
        self._items.extend(_operand(other))
        return self

    @override
    def __str__(self) -> str:
        return presenters.describe(self)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @staticmethod
    def is_js_array(value: Any) -> bool:
        """True only for arrays built by this library, not for look-alike lists."""
        return isinstance(value, JSArray)

    is_array = staticmethod(is_array)

    # JavaScript spellings
    isArray = is_array
    isJSArray = is_js_array
    copyWithin = copy_within
    findIndex = find_index
    findLast = find_last
    findLastIndex = find_last_index
    flatMap = flat_map
    forEach = for_each
    getLength = get_length
    indexOf = index_of
    lastIndexOf = last_index_of
    reduceRight = reduce_right
    toReversed = to_reversed
    toString = to_string
    valueOf = value_of


def _flatten(items: list[Any], depth: float) -> list[Any]:
    result: list[Any] = []
    for item in items:
        if depth >= 1 and is_array(item):
            result.extend(_flatten(elements_of(item), depth - 1))
        else:
            result.append(item)
    return result


def _concatenable(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, Number | str) or is_array(value)


def _operand(value: Any) -> list[Any]:
    return elements_of(value) if is_array(value) else [value]


def new(*elements: Any) -> JSArray:
    return JSArray(*elements)


of = JSArray.of
from_ = JSArray.from_
is_js_array = JSArray.is_js_array
