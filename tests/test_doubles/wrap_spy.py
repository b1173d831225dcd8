"""Test double: spy wrap handler for recording methods."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class WrapSpy:
    """Records wrap invocations, then delegates to ``behavior``.

    The default behavior records the call once through the base method.
    """

    behavior: Callable[..., Any] | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, base: Any, *args: Any) -> Any:
        self.calls.append({"base": base, "args": args})
        if self.behavior is None:
            return base(*args)
        return self.behavior(base, *args)
