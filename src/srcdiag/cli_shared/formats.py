# topmark:header:start
#
#   project      : SrcDiag
#   file         : formats.py
#   file_relpath : src/srcdiag/cli_shared/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats supported by the SrcDiag CLI."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly report; may include ANSI color if enabled.
      JSON: A single JSON envelope holding all diagnostics (machine-readable).
      NDJSON: One JSON object per diagnostic (newline-delimited JSON; machine-readable).

    Notes:
      Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"

    @property
    def is_machine(self) -> bool:
        """Return True for machine-readable formats."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)
