# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - Upstream failure descriptions are normalized into `RawFailure`.
    - `build_diagnostic` resolves positions against a `SourceLookup` and returns
      an immutable `SourceDiagnostic`.
    - Rendering lives in [`srcdiag.rendering`][srcdiag.rendering]; machine-readable
      JSON/NDJSON output lives in
      [`srcdiag.diagnostic.machine`][srcdiag.diagnostic.machine].
"""

from __future__ import annotations

from srcdiag.diagnostic.model import (
    EMPTY_EXTRACT,
    RawFailure,
    SourceDiagnostic,
    build_diagnostic,
)

__all__ = [
    "EMPTY_EXTRACT",
    "RawFailure",
    "SourceDiagnostic",
    "build_diagnostic",
]
