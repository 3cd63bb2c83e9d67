# topmark:header:start
#
#   project      : SrcDiag
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SrcDiag in a controlled working directory.

The `run_cli_in` fixture changes the process working directory to the given
`tmp_path` before invoking the Click CLI, so relative source paths named on the
command line or inside failure JSON resolve against the temporary directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Protocol

import pytest
from click.testing import CliRunner, Result

from srcdiag.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class RunCliIn(Protocol):
    """Callable signature of the `run_cli_in` fixture."""

    def __call__(
        self,
        tmp_path: Path,
        argv: Sequence[str],
        *,
        input_text: str | bytes | IO[Any] | None = None,
    ) -> Result: ...


def _run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["report", "a.less", ...]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv), input=input_text)
    finally:
        os.chdir(cwd)


@pytest.fixture
def run_cli_in() -> RunCliIn:
    """Return the CLI runner helper."""
    return _run_cli_in


@pytest.fixture
def less_project(tmp_path: Path) -> Path:
    """Create a working directory holding the running example ``a.less``."""
    (tmp_path / "a.less").write_text("body {\n  color: red;\n}\n", encoding="utf-8")
    return tmp_path
