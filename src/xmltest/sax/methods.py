"""Callables that record their invocations in a call ledger."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from xmltest.sax.ledger import CallEntry, CallLedger

# Receives the base recording method, followed by the call arguments
WrapHandler = Callable[..., Any]


class RecordingMethod:
    """Records ``(name, context, *args)`` every time it is called.

    The context is the object the method was bound to: the handler that
    created it, or any instance it is accessed through when stored as a class
    attribute. ``record_as`` records with an explicit context instead.
    """

    __slots__ = ("_ledger", "context", "name")

    def __init__(self, ledger: CallLedger, name: str, context: Any = None) -> None:
        self._ledger = ledger
        self.name = name
        self.context = context

    def __call__(self, *args: Any) -> None:
        self._ledger.append(CallEntry(self.name, self.context, *args))

    def record_as(self, context: Any, *args: Any) -> None:
        """Record a call using ``context`` as the calling context."""
        self._ledger.append(CallEntry(self.name, context, *args))

    def bind(self, context: Any) -> RecordingMethod:
        """Get a method recording into the same ledger with another context."""
        return RecordingMethod(self._ledger, self.name, context)

    def __get__(self, instance: Any, owner: type | None = None) -> RecordingMethod:
        if instance is None:
            return self
        return self.bind(instance)

    def __repr__(self) -> str:
        return f"<RecordingMethod {self.name}>"


class WrappedMethod:
    """Hands each call to a wrap handler instead of recording it directly.

    The wrap handler receives the base recording method, bound to the calling
    context, as first argument. It decides whether, how often and with which
    context the call is recorded. Its return value is discarded.
    """

    __slots__ = ("_base", "_wrap")

    def __init__(self, base: RecordingMethod, wrap: WrapHandler) -> None:
        self._base = base
        self._wrap = wrap

    @property
    def name(self) -> str:
        return self._base.name

    @property
    def context(self) -> Any:
        return self._base.context

    @property
    def wrapped(self) -> RecordingMethod:
        return self._base

    def __call__(self, *args: Any) -> None:
        self._wrap(self._base, *args)

    def record_as(self, context: Any, *args: Any) -> None:
        """Invoke the wrap handler with the base method bound to ``context``."""
        self._wrap(self._base.bind(context), *args)

    def bind(self, context: Any) -> WrappedMethod:
        return WrappedMethod(self._base.bind(context), self._wrap)

    def __get__(self, instance: Any, owner: type | None = None) -> WrappedMethod:
        if instance is None:
            return self
        return self.bind(instance)

    def __repr__(self) -> str:
        return f"<WrappedMethod {self.name} by {self._wrap!r}>"


def build_method(
    ledger: CallLedger,
    name: str,
    wrap: WrapHandler | None = None,
    context: Any = None,
) -> RecordingMethod | WrappedMethod:
    """Create the method for a catalog name.

    Args:
        ledger: Ledger the method records into
        name: Catalog name recorded for every call
        wrap: Optional handler substituted for the plain recording
        context: Calling context used when the method is called directly

    Returns:
        A recording method, wrapped when ``wrap`` is given
    """
    base = RecordingMethod(ledger, name, context)
    if wrap is None:
        return base
    return WrappedMethod(base, wrap)
