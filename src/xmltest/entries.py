"""Index of the entries in the xmltest archive.

The index maps each path in the archive to its file name, or to an empty
string for directories. Reading the archive itself is not done here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from xmltest.cache import Cache
from xmltest.filters import Filter, get_filtered

logger = logging.getLogger(__name__)

_INDEX_ADAPTER = TypeAdapter(dict[str, str])

# Parsed indexes by resolved path
INDEX_CACHE = Cache()


class EntriesIndexError(Exception):
    """Raised when an entries index cannot be read or is malformed."""


def load_entries(path: Path, cache: Cache | None = INDEX_CACHE) -> dict[str, str]:
    """Load an entries index from a JSON file.

    Args:
        path: JSON file containing ``{path_in_zip: name}``
        cache: Store for already parsed indexes, None to always read the file

    Returns:
        A copy of the index
    """
    key = str(Path(path).resolve())
    if cache is not None and cache.has(key):
        logger.debug("Entries index cache hit: %s", key)
        return dict(cache.get(key))

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        entries = _INDEX_ADAPTER.validate_python(raw)
    except OSError as e:
        raise EntriesIndexError(f"Cannot read entries index {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EntriesIndexError(f"Entries index {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise EntriesIndexError(f"Entries index {path} must map paths to names: {e}") from e

    logger.debug("Loaded %d entries from %s", len(entries), key)
    if cache is not None:
        cache.set(key, entries)
    return dict(entries)


def get_entries(entries: dict[str, str], *filters: Filter) -> Any:
    """Filter an entries index by its keys.

    See ``get_filtered`` for how the result shape depends on the filters.
    """
    return get_filtered(entries, filters)


def is_directory(path_in_zip: str) -> bool:
    return path_in_zip.endswith("/")
