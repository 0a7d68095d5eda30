from __future__ import annotations

import abc
from collections.abc import MutableSequence
from typing import (
    Any,
    TypeVar,
)

from typing_extensions import override

ValueT = TypeVar("ValueT")


class MutableSequenceMixin(abc.ABC, MutableSequence[ValueT]):
    """
    Provides the Python sequence protocol by delegating to a '_datastore'
    list supplied by the consuming class. Positions here are always native,
    0-based Python indices.
    """

    @property
    @abc.abstractmethod
    def _datastore(self) -> list[ValueT]:
        """Contract: The consuming class must provide a list object."""
        raise NotImplementedError

    @override
    def __len__(self) -> int:
        return self._datastore.__len__()

    @override
    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, int | slice):
            return self._datastore[index]
        raise TypeError(
            f"{type(self).__name__} indices must be integers or slices, "
            f"not {type(index).__name__}"
        )

    @override
    def __setitem__(self, index: Any, value: Any) -> None:
        self._datastore[index] = value

    @override
    def __delitem__(self, index: Any) -> None:
        del self._datastore[index]

    @override
    def insert(self, index: int, value: ValueT) -> None:
        self._datastore.insert(index, value)

    @override
    def clear(self) -> None:
        self._datastore.clear()
