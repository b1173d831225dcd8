"""Append-only record of method calls on one handler."""

from __future__ import annotations

from typing import Any


class CallEntry(tuple):
    """A recorded method call: ``(method name, calling context, *arguments)``.

    The method name is always the catalog name, never the alias the method
    was invoked through. Compares equal to a plain tuple with the same items.
    """

    __slots__ = ()

    def __new__(cls, name: str, context: Any = None, *args: Any) -> CallEntry:
        return super().__new__(cls, (name, context, *args))

    def __getnewargs__(self) -> tuple[Any, ...]:
        return tuple(self)

    @property
    def name(self) -> str:
        return self[0]

    @property
    def context(self) -> Any:
        return self[1]

    @property
    def args(self) -> tuple[Any, ...]:
        return tuple(self[2:])

    def __repr__(self) -> str:
        return f"CallEntry{tuple.__repr__(self)}"


class CallLedger:
    """Ordered calls recorded by one handler.

    Entries are never reordered or removed. Reads go through ``snapshot()``,
    which returns a fresh list on every call.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[CallEntry] = []

    def append(self, entry: CallEntry) -> None:
        """Record a call after all previously recorded calls."""
        self._entries.append(entry)

    def snapshot(self) -> list[CallEntry]:
        """Get copies of all recorded calls in recorded order."""
        return [CallEntry(*entry) for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
