"""Ordering and call count invariants over recorded SAX calls."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from xmltest.sax.catalog import CONTENT_METHOD_NAMES, ContentHandlerMethods
from xmltest.sax.ledger import CallEntry

CallPredicate = Callable[[CallEntry], bool]
MethodAssertion = Callable[[Sequence[CallEntry]], None]


class InvariantViolation(AssertionError):
    """Raised when recorded calls break a documented SAX contract."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(message)
        self.method = method


def can_only_be_called_once(method: str, calls: Sequence[CallEntry]) -> int:
    """Fail if ``method`` was called more than once.

    Returns:
        Number of recorded calls to ``method`` (0 or 1)
    """
    called = sum(1 for entry in calls if entry[0] == method)
    if called > 1:
        raise InvariantViolation(
            method,
            f"Expected only one call to '{method}', but has been called {called} times.",
        )
    return called


def should_be_called_once(method: str, calls: Sequence[CallEntry]) -> int:
    """Fail unless ``method`` was called exactly once."""
    called = can_only_be_called_once(method, calls)
    if called == 0:
        raise InvariantViolation(
            method,
            f"Expected at least one call to '{method}', but has not been called.",
        )
    return called


def _relevant(calls: Sequence[CallEntry], predicate: CallPredicate | None) -> list[CallEntry]:
    if predicate is None:
        return list(calls)
    return [entry for entry in calls if predicate(entry)]


def should_be_called_first(
    method: str,
    calls: Sequence[CallEntry],
    predicate: CallPredicate | None = None,
) -> None:
    """Fail unless the first call (among those matching ``predicate``) is ``method``."""
    relevant = _relevant(calls, predicate)
    first = relevant[0][0] if relevant else None
    if first != method:
        observed = f"'{first}'" if first is not None else "no call"
        raise InvariantViolation(
            method,
            f"Expected '{method}' to be called first, but was {observed}.",
        )


def should_be_called_last(
    method: str,
    calls: Sequence[CallEntry],
    predicate: CallPredicate | None = None,
) -> None:
    """Fail unless the last call (among those matching ``predicate``) is ``method``."""
    relevant = _relevant(calls, predicate)
    last = relevant[-1][0] if relevant else None
    if last != method:
        observed = f"'{last}'" if last is not None else "no call"
        raise InvariantViolation(
            method,
            f"Expected '{method}' to be called last, but was {observed}.",
        )


def _is_content_call(entry: CallEntry) -> bool:
    return entry[0] in CONTENT_METHOD_NAMES


def _is_document_content_call(entry: CallEntry) -> bool:
    return entry[0] != ContentHandlerMethods.setDocumentLocator and entry[0] in CONTENT_METHOD_NAMES


def assert_set_document_locator(calls: Sequence[CallEntry]) -> None:
    """At most once, and before all other ContentHandler calls."""
    it = ContentHandlerMethods.setDocumentLocator.value
    if can_only_be_called_once(it, calls) == 0:
        return
    should_be_called_first(it, calls, _is_content_call)


def assert_start_document(calls: Sequence[CallEntry]) -> None:
    """Exactly once, between setDocumentLocator (optional) and all other ContentHandler calls."""
    it = ContentHandlerMethods.startDocument.value
    should_be_called_once(it, calls)
    should_be_called_first(it, calls, _is_document_content_call)


def assert_end_document(calls: Sequence[CallEntry]) -> None:
    """At most once, and the last ContentHandler call.

    Whether endDocument is invoked after the parser reported a fatalError is
    left open by SAX, so its absence is not a violation.
    """
    it = ContentHandlerMethods.endDocument.value
    if can_only_be_called_once(it, calls) == 0:
        return
    should_be_called_last(it, calls, _is_document_content_call)


# Checked in insertion order; the first violation propagates
METHOD_ASSERTIONS: dict[str, MethodAssertion] = {
    ContentHandlerMethods.setDocumentLocator.value: assert_set_document_locator,
    ContentHandlerMethods.startDocument.value: assert_start_document,
    ContentHandlerMethods.endDocument.value: assert_end_document,
}


def run_assertions(
    calls: Sequence[CallEntry],
    assertions: Mapping[str, MethodAssertion] = METHOD_ASSERTIONS,
) -> None:
    """Run every assertion against ``calls``, raising the first InvariantViolation."""
    for assertion in assertions.values():
        assertion(calls)
