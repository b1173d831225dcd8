"""SAX handler that records every callback for later inspection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from xmltest.sax.assertions import METHOD_ASSERTIONS, MethodAssertion, run_assertions
from xmltest.sax.catalog import all_method_names, is_valid_name
from xmltest.sax.ledger import CallEntry, CallLedger
from xmltest.sax.methods import RecordingMethod, WrappedMethod, build_method

logger = logging.getLogger(__name__)


class HandlerConfig(BaseModel):
    """Options applied once when a handler is created.

    alias: catalog name -> additional name the same method is available at
    wrap: catalog name -> function receiving the base method, then the call arguments
    """

    model_config = ConfigDict(frozen=True)

    alias: dict[str, str] = Field(default_factory=dict)
    wrap: dict[str, Callable[..., Any]] = Field(default_factory=dict)


class SaxHandler:
    """Implements every SAX2 callback method and records calls in order.

    Can be attached to a SAX parser as content, DTD, declaration, lexical,
    error handler and entity resolver at once.

    Example:
        handler = SaxHandler(alias={"characters": "on_text"})
        handler.startDocument()
        handler.on_text("abc", 0, 3)
        handler.endDocument()
        handler.assert_method_calls()
        handler.get_calls_in_order()
        # [("startDocument", handler), ("characters", handler, "abc", 0, 3), ...]
    """

    def __init__(
        self,
        config: HandlerConfig | None = None,
        *,
        alias: Mapping[str, str] | None = None,
        wrap: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        if config is None:
            config = HandlerConfig(alias=dict(alias or {}), wrap=dict(wrap or {}))
        elif alias is not None or wrap is not None:
            raise TypeError("Pass either a HandlerConfig or alias/wrap keywords, not both")

        self._ledger = CallLedger()
        self._methods: dict[str, RecordingMethod | WrappedMethod] = {}
        self._aliases: dict[str, str] = {}

        for name in all_method_names():
            method = build_method(self._ledger, name, config.wrap.get(name), context=self)
            self._methods[name] = method
            setattr(self, name, method)

        for name, alias_name in config.alias.items():
            if not alias_name:
                continue
            if not is_valid_name(name):
                logger.debug("Ignoring alias %r for unknown method %r", alias_name, name)
                continue
            if is_valid_name(alias_name) or _is_reserved(alias_name):
                # Never replace a catalog method or the handler's own API
                logger.debug("Ignoring alias %r for %r: name is taken", alias_name, name)
                continue
            self._aliases[alias_name] = name
            self._methods[alias_name] = self._methods[name]
            setattr(self, alias_name, self._methods[name])

    @property
    def aliases(self) -> dict[str, str]:
        """Get the wired alias names mapped to their catalog names."""
        return dict(self._aliases)

    def get_calls_in_order(self) -> list[CallEntry]:
        """Return copies of the recorded method calls in the recorded order."""
        return self._ledger.snapshot()

    def assert_method_calls(
        self, assertions: Mapping[str, MethodAssertion] = METHOD_ASSERTIONS
    ) -> None:
        """Verify assumptions about the recorded calls.

        Raises:
            InvariantViolation: for the first assertion that fails
        """
        run_assertions(self._ledger.snapshot(), assertions)

    def __getitem__(self, name: str) -> RecordingMethod | WrappedMethod:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __repr__(self) -> str:
        return f"<SaxHandler calls={len(self._ledger)}>"


_RESERVED_NAMES = frozenset(dir(SaxHandler))


def _is_reserved(name: str) -> bool:
    return name.startswith("_") or name in _RESERVED_NAMES


def sax_handler(
    alias: Mapping[str, str] | None = None,
    wrap: Mapping[str, Callable[..., Any]] | None = None,
) -> SaxHandler:
    """Create a recording handler.

    Args:
        alias: Make catalog methods available at custom names
        wrap: Replace the recording of a method with a custom function that
            receives the base method as first argument

    Returns:
        A new handler with an empty call ledger
    """
    return SaxHandler(alias=alias, wrap=wrap)

