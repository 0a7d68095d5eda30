import inspect
import math
from collections.abc import Callable
from numbers import Integral, Real
from typing import Any, Final, TypeVar

from .exceptions import ArgumentTypeError, MissingArgumentError
from .protocols import Callback, is_array, is_container


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


T = TypeVar("T")


def required(t: T | None, message: str = "Required argument is missing") -> T:
    if t is None:
        raise MissingArgumentError(message)
    return t


def ensure_callable(value: Any, method: str, position: int) -> Callback:
    if not callable(value):
        raise ArgumentTypeError(method, position, "callable", value)
    return value


def ensure_number(value: Any, method: str, position: int) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ArgumentTypeError(method, position, "number", value)
    if isinstance(value, Integral):
        return value
    if math.isnan(value):
        raise ArgumentTypeError(method, position, "non-NaN number", value)
    return value


def positional_capacity(callback: Callable[..., Any]) -> int | None:
    """
    Counts the positional arguments a callback can take.

    Returns -1 for `*args` callbacks and None when the signature cannot be
    inspected. Classes count as unknown: `str` or `int` must only ever see
    the element, never the position.
    """
    if isinstance(callback, type):
        return None
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return -1
        if param.kind in _POSITIONAL:
            count += 1
    return count


def adapt_callback(callback: Callback, fallback: int = 1) -> Callback:
    """
    Wraps a callback so it only receives the leading arguments it accepts.

    JavaScript callbacks silently ignore surplus arguments; Python ones raise,
    so `arr.map(lambda x: x * 2)` needs the index and array dropped.
    """
    capacity = positional_capacity(callback)
    if capacity == -1:
        return callback
    if capacity is None:
        capacity = fallback

    def call(*args: Any) -> Any:
        return callback(*args[:capacity])

    return call


def elements_of(value: Any) -> list[Any]:
    """Copies the elements of a sequence-like value into a plain list."""
    return [value[index] for index in range(len(value))]


def strictly_equal(a: Any, b: Any) -> bool:
    """
    Identity for containers, value equality for everything else.

    Booleans never equal numbers, mirroring `===`.
    """
    if a is b:
        return True
    if is_container(a) or is_container(b):
        return False
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return bool(a == b)


def is_empty_container(value: Any) -> bool:
    return is_container(value) and len(value) == 0
