from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .config import config
from .log import logger
from .protocols import is_array, is_container
from .utils import elements_of


def describe(value: Any, *, indent: str | None = None) -> str:
    """
    Renders nested data in a human-readable, indented form.

    Strings are quoted, containers are expanded one entry per line with their
    key (`[1]` for positions, `["name"]` for string keys), anything else uses
    `str()`. Empty containers render as `{}` and cycles as `{...}`.
    """
    settings = config()
    return _describe(
        value,
        depth=1,
        indent=settings.indent if indent is None else indent,
        base=settings.index_base,
        seen=frozenset(),
    )


def _describe(
    value: Any, *, depth: int, indent: str, base: int, seen: frozenset[int]
) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if not is_container(value):
        return str(value)
    if id(value) in seen:
        logger().debug(f"describe(): cycle detected at depth {depth}")
        return "{...}"

    pairs = _pairs(value, base)
    if not pairs:
        return "{}"

    seen = seen | {id(value)}
    lines = [
        f"{indent * depth}{_key(key)} = "
        f"{_describe(item, depth=depth + 1, indent=indent, base=base, seen=seen)},\n"
        for key, item in pairs
    ]
    return "{\n" + "".join(lines) + indent * (depth - 1) + "}"


def _pairs(value: Any, base: int) -> list[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    return list(enumerate(elements_of(value), start=base))


def _key(key: Any) -> str:
    if isinstance(key, str):
        return f'["{key}"]'
    return f"[{key}]"


def join(values: Iterable[Any], separator: str) -> str:
    """
    Joins top-level values with `separator`.

    Nested arrays are joined with "," whatever the outer separator is. An array
    that contains itself contributes an empty string at the repeat.
    """
    return _join(values, separator, seen=frozenset({id(values)}))


def _join(values: Iterable[Any], separator: str, seen: frozenset[int]) -> str:
    parts: list[str] = []
    for value in values:
        if not is_array(value):
            parts.append(str(value))
        elif id(value) in seen:
            parts.append("")
        else:
            parts.append(_join(elements_of(value), ",", seen | {id(value)}))
    return separator.join(parts)
