# topmark:header:start
#
#   project      : SrcDiag
#   file         : constants.py
#   file_relpath : src/srcdiag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SRCDIAG_VERSION: str = get_version("srcdiag")

TOOL_NAME: str = "srcdiag"

# Error category used when the raw failure does not name one.
DEFAULT_KIND: str = "Syntax"

# Settings discovery (working directory only; no upward search).
SETTINGS_FILE_NAME: str = "srcdiag.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "srcdiag"

DEFAULT_ENCODING: str = "utf-8"
