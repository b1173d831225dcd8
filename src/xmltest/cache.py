"""In-memory key/value store used to memoize loaded content."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any


class Cache:
    """Map-like store with explicit ``get``/``set``/``has``/``delete`` operations.

    Keys are compared like dictionary keys, so ``None``, ``0`` and ``""`` are
    distinct valid keys.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[Hashable, Any] = {}

    def clear(self) -> None:
        """Drop every key."""
        self._data = {}

    def delete(self, key: Hashable) -> bool:
        """Remove ``key``, returning whether it was present."""
        return self._data.pop(key, _MISSING) is not _MISSING

    def get(self, key: Hashable) -> Any:
        """Get the value for ``key``, or None when absent."""
        return self._data.get(key)

    def has(self, key: Hashable) -> bool:
        return key in self._data

    def keys(self) -> list[Hashable]:
        """Get all keys in insertion order."""
        return list(self._data)

    def set(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)


_MISSING = object()
