"""xmltest - SAX handler test doubles and helpers for the XML conformance suite."""

__version__ = "0.1.0"

from xmltest.cache import Cache
from xmltest.filters import FILTERS, RELATED, combine_filters, get_filtered
from xmltest.sax import InvariantViolation, SaxHandler, sax_handler

__all__ = [
    "FILTERS",
    "RELATED",
    "Cache",
    "InvariantViolation",
    "SaxHandler",
    "combine_filters",
    "get_filtered",
    "sax_handler",
]
