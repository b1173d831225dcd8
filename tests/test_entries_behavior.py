"""Behavior tests for loading and filtering the entries index."""

from __future__ import annotations

import json

import pytest

from xmltest.cache import Cache
from xmltest.entries import INDEX_CACHE, EntriesIndexError, get_entries, load_entries
from xmltest.filters import FILTERS


def test_load_entries_reads_index(entries_index):
    entries = load_entries(entries_index)

    assert entries["xmltest/readme.html"] == "readme.html"
    assert entries["xmltest/valid/"] == ""


def test_load_entries_memoizes_by_path(entries_index):
    first = load_entries(entries_index)
    entries_index.write_text(json.dumps({"changed": "changed"}))

    second = load_entries(entries_index)

    assert second == first
    assert second is not first
    assert INDEX_CACHE.has(str(entries_index.resolve()))


def test_load_entries_without_cache_rereads(entries_index):
    load_entries(entries_index, cache=None)
    entries_index.write_text(json.dumps({"changed": "changed"}))

    assert load_entries(entries_index, cache=None) == {"changed": "changed"}


def test_load_entries_uses_given_cache(entries_index):
    cache = Cache()

    load_entries(entries_index, cache=cache)

    assert cache.keys() == [str(entries_index.resolve())]


def test_returned_index_does_not_change_cache(entries_index):
    load_entries(entries_index).clear()

    assert load_entries(entries_index) != {}


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("not json", "not valid JSON"),
        (json.dumps({"a": 1}), "must map paths to names"),
        (json.dumps(["a"]), "must map paths to names"),
    ],
)
def test_load_entries_rejects_malformed_index(temp_dir, content, message):
    path = temp_dir / "broken.json"
    path.write_text(content)

    with pytest.raises(EntriesIndexError, match=message):
        load_entries(path, cache=None)


def test_load_entries_reports_missing_file(temp_dir):
    with pytest.raises(EntriesIndexError, match="Cannot read"):
        load_entries(temp_dir / "missing.json", cache=None)


def test_get_entries_applies_filters(entries_index):
    entries = load_entries(entries_index)

    assert get_entries(entries, "readme") == "readme.html"
    assert get_entries(entries, FILTERS.VALID.SA.files, FILTERS.xml) == {
        "xmltest/valid/sa/001.xml": "001.xml"
    }
    assert get_entries(entries) == entries
