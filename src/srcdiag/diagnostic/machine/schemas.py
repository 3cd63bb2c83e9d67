# topmark:header:start
#
#   project      : SrcDiag
#   file         : schemas.py
#   file_relpath : src/srcdiag/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for SrcDiag machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- the runtime metadata block (`MetaPayload`)
- the per-diagnostic payload (`MachineDiagnosticEntry`)

It is pure: no Click, no console, no serialization side-effects.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypedDict

from srcdiag.constants import SRCDIAG_VERSION, TOOL_NAME

if TYPE_CHECKING:
    from srcdiag.diagnostic.model import SourceDiagnostic


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"
    DIAGNOSTIC: Final[str] = "diagnostic"
    DIAGNOSTICS: Final[str] = "diagnostics"
    LOCATION: Final[str] = "location"
    VERSION: Final[str] = "version"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    DIAGNOSTIC: Final[str] = "diagnostic"
    LOCATION: Final[str] = "location"
    VERSION: Final[str] = "version"


class MetaPayload(TypedDict):
    """Metadata describing the SrcDiag runtime environment for machine output."""

    tool: str
    version: str
    platform: str


def build_meta_payload() -> MetaPayload:
    """Return the metadata block shared by all machine-output records."""
    return MetaPayload(
        tool=TOOL_NAME,
        version=SRCDIAG_VERSION,
        platform=platform.system().lower(),
    )


@dataclass(slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        kind: Error category (e.g. ``"Syntax"``).
        filename: Source file, if known.
        offset: Raw character offset, if known.
        line: 1-based line, if resolved.
        column: 0-based column, if resolved.
        call_line: 1-based inclusion line, if any.
        call_extract: Text of the inclusion line, if any.
        extract: The three context lines (``None`` for missing lines).
        message: Failure message.
        stack: Stack trace, if any.
    """

    kind: str
    filename: str | None
    offset: int | None
    line: int | None
    column: int | None
    call_line: int | None
    call_extract: str | None
    extract: list[str | None]
    message: str | None
    stack: str | None

    @classmethod
    def from_diagnostic(cls, d: SourceDiagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from a diagnostic.

        Args:
            d: Diagnostic instance.

        Returns:
            A `MachineDiagnosticEntry` mirroring the diagnostic's public fields.
        """
        return cls(
            kind=d.kind,
            filename=d.filename,
            offset=d.offset,
            line=d.line,
            column=d.column,
            call_line=d.call_line,
            call_extract=d.call_extract,
            extract=list(d.extract),
            message=d.message,
            stack=d.stack,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this diagnostic entry."""
        return {
            "kind": self.kind,
            "filename": self.filename,
            "offset": self.offset,
            "line": self.line,
            "column": self.column,
            "call_line": self.call_line,
            "call_extract": self.call_extract,
            "extract": list(self.extract),
            "message": self.message,
            "stack": self.stack,
        }
