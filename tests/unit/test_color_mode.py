# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_color_mode.py
#   file_relpath : tests/unit/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution and verbosity flags."""

from __future__ import annotations

import logging

import pytest

from srcdiag.cli.errors import SrcDiagUsageError
from srcdiag.cli.options import resolve_verbosity
from srcdiag.cli_shared.color import ColorMode, resolve_color_mode
from srcdiag.config.logging import TRACE_LEVEL


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.mark.parametrize("fmt", ["json", "ndjson", "JSON"])
def test_machine_formats_disable_color(fmt: str) -> None:
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format=fmt) is False


@pytest.mark.parametrize(
    ("mode", "isatty", "expected"),
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
        (None, True, True),
    ],
)
def test_override_and_tty_detection(
    mode: ColorMode | None, isatty: bool, expected: bool
) -> None:
    assert (
        resolve_color_mode(color_mode_override=mode, output_format="default", stdout_isatty=isatty)
        is expected
    )


def test_environment_decides_in_auto_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(
        color_mode_override=ColorMode.AUTO, output_format=None, stdout_isatty=False
    )

    monkeypatch.delenv("FORCE_COLOR")
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(
        color_mode_override=None, output_format=None, stdout_isatty=True
    )


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both_flags() -> None:
    with pytest.raises(SrcDiagUsageError):
        resolve_verbosity(1, 1)
