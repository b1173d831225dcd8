"""Method names of the SAX2 callback interfaces, grouped by interface."""

from __future__ import annotations

from enum import StrEnum


class ContentHandlerMethods(StrEnum):
    """Receive notification of the logical content of a document.

    The order of events in this interface mirrors the order of information in
    the document itself: all of an element's content appears, in order, between
    the startElement event and the corresponding endElement event.

    See http://sax.sourceforge.net/apidoc/org/xml/sax/ContentHandler.html
    """

    characters = "characters"
    endDocument = "endDocument"
    endElement = "endElement"
    endPrefixMapping = "endPrefixMapping"
    ignorableWhitespace = "ignorableWhitespace"
    processingInstruction = "processingInstruction"
    setDocumentLocator = "setDocumentLocator"
    skippedEntity = "skippedEntity"
    startDocument = "startDocument"
    startElement = "startElement"
    startPrefixMapping = "startPrefixMapping"


class DeclHandlerMethods(StrEnum):
    """SAX2 extension handler for DTD declaration events.

    When used together with a lexical handler, all of these events occur
    between the startDTD and endDTD events.
    """

    attributeDecl = "attributeDecl"
    elementDecl = "elementDecl"
    externalEntityDecl = "externalEntityDecl"
    internalEntityDecl = "internalEntityDecl"


class DTDHandlerMethods(StrEnum):
    """Notation and unparsed entity declarations.

    Reported after startDocument and before the first startElement, in any order.
    """

    notationDecl = "notationDecl"
    unparsedEntityDecl = "unparsedEntityDecl"


class EntityResolverMethods(StrEnum):
    """Customized resolution of external entities."""

    resolveEntity = "resolveEntity"


class ErrorHandlerMethods(StrEnum):
    """Errors and warnings reported by the parser instead of raising."""

    error = "error"
    fatalError = "fatalError"
    warning = "warning"


class LexicalHandlerMethods(StrEnum):
    """SAX2 extension handler for lexical events (comments, CDATA, DTD and entity boundaries).

    All lexical events appear between startDocument and endDocument.
    """

    comment = "comment"
    endCDATA = "endCDATA"
    endDTD = "endDTD"
    endEntity = "endEntity"
    startCDATA = "startCDATA"
    startDTD = "startDTD"
    startEntity = "startEntity"


# Category name -> interface, in documentation order
CATEGORIES: dict[str, type[StrEnum]] = {
    "content": ContentHandlerMethods,
    "declaration": DeclHandlerMethods,
    "dtd": DTDHandlerMethods,
    "entity-resolution": EntityResolverMethods,
    "error": ErrorHandlerMethods,
    "lexical": LexicalHandlerMethods,
}

_ALL_METHOD_NAMES: tuple[str, ...] = tuple(
    member.value for methods in CATEGORIES.values() for member in methods
)
_CATEGORY_BY_NAME: dict[str, str] = {
    member.value: category for category, methods in CATEGORIES.items() for member in methods
}

CONTENT_METHOD_NAMES: frozenset[str] = frozenset(m.value for m in ContentHandlerMethods)


def all_method_names() -> list[str]:
    """Return every catalog method name, grouped by category in a stable order."""
    return list(_ALL_METHOD_NAMES)


def is_valid_name(name: object) -> bool:
    """Check whether ``name`` is a catalog method name."""
    return isinstance(name, str) and name in _CATEGORY_BY_NAME


def category_of(name: str) -> str | None:
    """Get the category of a catalog method name, or None for unknown names."""
    return _CATEGORY_BY_NAME.get(name)
