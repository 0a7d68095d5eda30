from __future__ import annotations

from collections.abc import Mapping
from typing import (
    Any,
    Protocol,
    TypeVar,
    runtime_checkable,
)

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ArrayLike(Protocol[T_co]):
    """Anything exposing a length and positional access."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: Any, /) -> Any: ...


class Callback(Protocol):
    def __call__(self, *args: Any) -> Any: ...


class Comparator(Protocol):
    def __call__(self, a: Any, b: Any, /) -> float: ...


TEXT_TYPES = (str, bytes, bytearray)


def is_array(value: object) -> bool:
    """
    Determines whether a value is sequence-like.

    Strings and mappings expose a length and `__getitem__` too, but they are
    never treated as arrays. Empty containers are arrays.
    """
    if isinstance(value, type):
        # classes carry `__len__` and `__getitem__` as unbound attributes
        return False
    if isinstance(value, TEXT_TYPES) or isinstance(value, Mapping):
        return False
    return isinstance(value, ArrayLike)


def is_container(value: object) -> bool:
    return is_array(value) or isinstance(value, Mapping)
