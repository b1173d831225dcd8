"""Shared test fixtures."""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

import pytest

from xmltest.entries import INDEX_CACHE
from xmltest.sax import SaxHandler


@pytest.fixture(autouse=True)
def reset_xmltest_logger():
    """Undo logging configured by CLI invocations."""
    yield
    logger = logging.getLogger("xmltest")
    for log_handler in list(logger.handlers):
        logger.removeHandler(log_handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir() -> Path:
    """Temporary directory for filesystem-based tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def handler() -> SaxHandler:
    """Fresh recording handler without options."""
    return SaxHandler()


@pytest.fixture
def isolated_env(temp_dir, monkeypatch) -> Path:
    """Empty home and project directories without XMLTEST_* variables."""
    home = temp_dir / "home"
    project = temp_dir / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for var in ("XMLTEST_INDEX", "XMLTEST_LOG_LEVEL", "XMLTEST_VISIBLE_CONTROL_CHARS"):
        monkeypatch.delenv(var, raising=False)
    return temp_dir


@pytest.fixture
def entries_index(temp_dir) -> Path:
    """Entries index shaped like the one generated from xmltest.zip."""
    INDEX_CACHE.clear()
    path = temp_dir / "xmltest.json"
    path.write_text(
        json.dumps(
            {
                "xmltest/readme.html": "readme.html",
                "xmltest/valid/sa/001.xml": "001.xml",
                "xmltest/valid/sa/out/001.xml": "001.xml",
                "xmltest/valid/sa/002.ent": "002.ent",
                "xmltest/not-wf/sa/001.xml": "001.xml",
                "xmltest/invalid/002.xml": "002.xml",
                "xmltest/valid/": "",
            }
        )
    )
    yield path
    INDEX_CACHE.clear()
