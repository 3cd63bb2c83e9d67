# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-output helpers for diagnostics.

Layers:

- **schemas**: canonical keys/kinds, the `MetaPayload` and the per-diagnostic
  `MachineDiagnosticEntry` payload.
- **serializers**: JSON envelope and NDJSON record serialization.

Machine formats never carry ANSI styling; they expose the diagnostic fields
as-is (``None`` for unresolved fields).
"""

from __future__ import annotations

from srcdiag.diagnostic.machine.schemas import MachineDiagnosticEntry, build_meta_payload
from srcdiag.diagnostic.machine.serializers import (
    serialize_diagnostics_json,
    serialize_diagnostics_ndjson,
)

__all__ = [
    "MachineDiagnosticEntry",
    "build_meta_payload",
    "serialize_diagnostics_json",
    "serialize_diagnostics_ndjson",
]
