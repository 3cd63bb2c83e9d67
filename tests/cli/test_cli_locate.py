# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_cli_locate.py
#   file_relpath : tests/cli/test_cli_locate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`srcdiag locate`: offset to line:column resolution for a file."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from srcdiag.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from click.testing import Result

    RunCliIn = Callable[..., Result]

pytestmark = pytest.mark.cli


@pytest.mark.parametrize(
    ("offset", "expected"),
    [("0", "1:1"), ("17", "2:11"), ("21", "3:1"), ("9999", "4:1")],
)
def test_locate_prints_one_based_position(
    run_cli_in: RunCliIn, less_project: Path, offset: str, expected: str
) -> None:
    result: Result = run_cli_in(less_project, ["--no-color", "locate", "a.less", offset])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == f"{expected}\n"


def test_locate_json(run_cli_in: RunCliIn, less_project: Path) -> None:
    result: Result = run_cli_in(less_project, ["locate", "a.less", "17", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["meta"]["tool"] == "srcdiag"
    assert payload["location"] == {"file": "a.less", "offset": 17, "line": 2, "column": 10}


def test_locate_ndjson(run_cli_in: RunCliIn, less_project: Path) -> None:
    result: Result = run_cli_in(less_project, ["locate", "a.less", "7", "--format", "ndjson"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    record: dict[str, Any] = json.loads(result.stdout)
    assert record["kind"] == "location"
    assert record["location"]["line"] == 2
    assert record["location"]["column"] == 0


def test_locate_rejects_negative_offset(run_cli_in: RunCliIn, less_project: Path) -> None:
    result: Result = run_cli_in(less_project, ["locate", "a.less", "-3"])
    assert result.exit_code != ExitCode.SUCCESS


def test_locate_missing_file(run_cli_in: RunCliIn, tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "locate", "missing.less", "0"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No such file: missing.less" in result.output
