# topmark:header:start
#
#   project      : SrcDiag
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SrcDiag test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import pytest

from srcdiag.config import logging
from srcdiag.sources import SourceSession

# The running example used across the suite: offset 17 is the "e" of "red".
SAMPLE_FILENAME = "a.less"
SAMPLE_TEXT = "body {\n  color: red;\n}\n"
SAMPLE_INDEX = 17


@pytest.fixture(autouse=True)
def silence_srcdiag_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SrcDiag's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so construction paths log during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sample_session() -> SourceSession:
    """Return a session holding the running example source."""
    return SourceSession({SAMPLE_FILENAME: SAMPLE_TEXT})


@pytest.fixture
def sample_failure() -> dict[str, object]:
    """Return the running example failure in boundary shape."""
    return {
        "filename": SAMPLE_FILENAME,
        "index": SAMPLE_INDEX,
        "message": "Unrecognised input",
    }
