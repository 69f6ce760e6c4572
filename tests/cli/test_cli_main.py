# topmark:header:start
#
#   project      : IndexEnc
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the command group, shared options and `indexenc version`."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from indexenc.cli.errors import IndexencUsageError
from indexenc.cli.options import resolve_color, resolve_verbosity
from indexenc.config.logging import TRACE_LEVEL
from indexenc.constants import INDEXENC_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "indexenc encode" in result.output
    assert "encode" in result.output and "version" in result.output


@mark_cli
def test_version_text() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == INDEXENC_VERSION


@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": INDEXENC_VERSION}


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-v", "-q", "version"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_quiet_encode_prints_only_the_result(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-q", "--no-color", "encode"], input_text="x = 1\n")
    assert_SUCCESS(result)
    assert result.output == "1\n"


@mark_cli
@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


@mark_cli
def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(IndexencUsageError):
        resolve_verbosity(1, 1)


@mark_cli
def test_resolve_color(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_color(True) is True
    assert resolve_color(False) is False
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color(None) is False
