"""Behavior tests for the CLI via the Typer runner."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from xmltest import cli
from xmltest.sax import all_method_names


def test_catalog_lists_every_method_grouped_by_category(isolated_env):
    result = CliRunner().invoke(cli.app, ["catalog"])

    assert result.exit_code == 0
    assert "[content]" in result.stdout
    assert "[entity-resolution]" in result.stdout
    listed = [line.strip() for line in result.stdout.splitlines() if line.startswith("  ")]
    assert listed == all_method_names()


def test_catalog_lists_single_category(isolated_env):
    result = CliRunner().invoke(cli.app, ["catalog", "--category", "error"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["error", "fatalError", "warning"]


def test_catalog_rejects_unknown_category(isolated_env):
    result = CliRunner().invoke(cli.app, ["catalog", "-c", "bogus"])

    assert result.exit_code == 1
    assert "Unknown category: bogus" in result.stderr


def test_entries_without_index_errors(isolated_env):
    result = CliRunner().invoke(cli.app, ["entries"])

    assert result.exit_code == 1
    assert "No entries index given" in result.stderr


def test_entries_with_missing_index_errors(isolated_env):
    result = CliRunner().invoke(
        cli.app, ["entries", "--index", str(isolated_env / "missing.json")]
    )

    assert result.exit_code == 1
    assert "Cannot read entries index" in result.stderr


def test_entries_prints_all_entries_as_json(isolated_env, entries_index):
    result = CliRunner().invoke(cli.app, ["entries", "--index", str(entries_index)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == json.loads(entries_index.read_text())


def test_entries_prints_single_value_raw(isolated_env, entries_index):
    result = CliRunner().invoke(
        cli.app, ["entries", "xmltest/readme.html", "--index", str(entries_index)]
    )

    assert result.exit_code == 0
    assert result.stdout == "readme.html\n"


def test_entries_reads_index_from_environment(isolated_env, entries_index, monkeypatch):
    monkeypatch.setenv("XMLTEST_INDEX", str(entries_index))

    result = CliRunner().invoke(cli.app, ["entries", "not-wf", "sa"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"xmltest/not-wf/sa/001.xml": "001.xml"}


def test_entries_regex_filters(isolated_env, entries_index):
    result = CliRunner().invoke(
        cli.app, ["entries", r"/\d{3}\.ent$", "--regex", "--index", str(entries_index)]
    )

    assert result.exit_code == 0
    assert result.stdout == "002.ent\n"


def test_entries_files_only_leaves_out_directories(isolated_env, entries_index):
    result = CliRunner().invoke(
        cli.app, ["entries", "--files-only", "--index", str(entries_index)]
    )

    assert result.exit_code == 0
    entries = json.loads(result.stdout)
    assert "xmltest/valid/" not in entries
    assert len(entries) == 6


def test_entries_rejects_invalid_pattern(isolated_env, entries_index):
    result = CliRunner().invoke(
        cli.app, ["entries", "(", "--regex", "--index", str(entries_index)]
    )

    assert result.exit_code == 1
    assert "Invalid pattern" in result.stderr


def test_verbose_enables_debug_logging(isolated_env, entries_index):
    result = CliRunner().invoke(
        cli.app, ["--verbose", "entries", "--index", str(entries_index)]
    )

    assert result.exit_code == 0
    assert "Loaded 7 entries" in result.stderr
