"""Predicates and path helpers for entries of the xmltest suite."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Callable, Mapping
from types import SimpleNamespace
from typing import Any

Predicate = Callable[[str], bool]
Filter = str | re.Pattern[str] | Predicate

# Unicode category Cc plus the noncharacter U+FFFF
_NON_TEXT_CHARS = re.compile("[\x00-\x1f\x7f-\x9f\uffff]")


def _as_predicate(test: Filter) -> Predicate:
    if isinstance(test, str):
        return lambda s: test in s
    if isinstance(test, re.Pattern):
        return lambda s: test.search(s) is not None
    if callable(test):
        return test
    raise TypeError(f"Unsupported filter: {test!r}")


def combine_filters(*tests: Filter) -> Predicate:
    """Create a predicate that accepts a value only if all ``tests`` accept it.

    Each test is one of:
    - a string the value needs to contain
    - a compiled pattern that needs to match somewhere in the value
    - a predicate function
    """
    checks = [_as_predicate(test) for test in tests]
    return lambda s: all(check(s) for check in checks)


def _files_in(directory: str) -> Predicate:
    # Only files directly inside the directory, not in nested ones
    return combine_filters(re.compile(rf"{re.escape(directory)}/[^/]+$"))


# Directory structure of xmltest.zip; `files` only accepts files directly in that directory
FILTERS = SimpleNamespace(
    INVALID=combine_filters("xmltest/invalid"),
    NOT_WF=SimpleNamespace(
        EXT_SA=SimpleNamespace(files=_files_in("xmltest/not-wf/ext-sa")),
        NOT_SA=SimpleNamespace(files=_files_in("xmltest/not-wf/not-sa")),
        SA=SimpleNamespace(files=_files_in("xmltest/not-wf/sa")),
    ),
    VALID=SimpleNamespace(
        EXT_SA=SimpleNamespace(
            files=_files_in("xmltest/valid/ext-sa"),
            OUT=combine_filters("xmltest/valid/ext-sa/out"),
        ),
        NOT_SA=SimpleNamespace(
            files=_files_in("xmltest/valid/not-sa"),
            OUT=combine_filters("xmltest/valid/not-sa/out"),
        ),
        SA=SimpleNamespace(
            files=_files_in("xmltest/valid/sa"),
            OUT=combine_filters("xmltest/valid/sa/out"),
        ),
    ),
    ent=lambda s: s.endswith(".ent"),
    xml=lambda s: s.endswith(".xml"),
)


def _related_ent(path_in_zip: str) -> str:
    """Name of the `.ent` file next to the given `.xml` file."""
    return re.sub(r"\.xml$", ".ent", path_in_zip)


def _related_out(path_in_zip: str) -> str:
    """Name of the expected output `out/<name>.xml`; only `valid` directories have one."""
    return "/".join([posixpath.dirname(path_in_zip), "out", posixpath.basename(path_in_zip)])


RELATED = SimpleNamespace(ent=_related_ent, out=_related_out)


def get_filtered(data: Mapping[str, Any], filters: list[Filter] | tuple[Filter, ...]) -> Any:
    """Filter ``data`` by applying ``filters`` to its keys.

    Returns:
        The value when a single filter selects exactly one entry (or is an
        existing key), otherwise a dict with every matching key
    """
    if not filters:
        return dict(data)
    key = filters[0]
    if len(filters) == 1 and isinstance(key, str) and key in data:
        keys = [key]
    else:
        predicate = combine_filters(*filters)
        keys = [k for k in data if predicate(k)]
    if len(keys) == 1 and len(filters) == 1:
        return data[keys[0]]
    return {k: data[k] for k in keys}


def replace_with_wrapped_code_point(char: str) -> str:
    return f"{{!{ord(char)}!}}"


def replace_non_text_chars(
    value: Any, wrapper: Callable[[str], str] = replace_with_wrapped_code_point
) -> Any:
    """Make invisible characters visible, e.g. NUL becomes ``{!0!}``.

    Some documents of the suite purposely contain control characters that make
    results hard to read and make git treat stored output as binary.
    """
    if value is None or value == "":
        return value
    return _NON_TEXT_CHARS.sub(lambda m: wrapper(m.group(0)), str(value))
