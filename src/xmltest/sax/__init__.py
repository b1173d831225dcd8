"""Call-recording SAX handler.

A handler exposes every method of the SAX2 callback interfaces:
- Records each invocation (name, context, arguments) in order
- Makes methods available under alias names
- Wraps methods with custom behavior around the recording
- Checks ordering invariants over the recorded calls
"""

from xmltest.sax.assertions import (
    METHOD_ASSERTIONS,
    InvariantViolation,
    can_only_be_called_once,
    run_assertions,
    should_be_called_first,
    should_be_called_last,
    should_be_called_once,
)
from xmltest.sax.catalog import (
    CATEGORIES,
    ContentHandlerMethods,
    DeclHandlerMethods,
    DTDHandlerMethods,
    EntityResolverMethods,
    ErrorHandlerMethods,
    LexicalHandlerMethods,
    all_method_names,
    category_of,
    is_valid_name,
)
from xmltest.sax.handler import HandlerConfig, SaxHandler, sax_handler
from xmltest.sax.ledger import CallEntry, CallLedger
from xmltest.sax.methods import RecordingMethod, WrappedMethod, build_method

__all__ = [
    "CATEGORIES",
    "METHOD_ASSERTIONS",
    "CallEntry",
    "CallLedger",
    "ContentHandlerMethods",
    "DTDHandlerMethods",
    "DeclHandlerMethods",
    "EntityResolverMethods",
    "ErrorHandlerMethods",
    "HandlerConfig",
    "InvariantViolation",
    "LexicalHandlerMethods",
    "RecordingMethod",
    "SaxHandler",
    "WrappedMethod",
    "all_method_names",
    "build_method",
    "can_only_be_called_once",
    "category_of",
    "is_valid_name",
    "run_assertions",
    "sax_handler",
    "should_be_called_first",
    "should_be_called_last",
    "should_be_called_once",
]
