# topmark:header:start
#
#   project      : SrcDiag
#   file         : serializers.py
#   file_relpath : src/srcdiag/diagnostic/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON/NDJSON serialization of diagnostics.

Conventions:
- `serialize_diagnostics_json()` returns pretty-printed JSON without a trailing
  newline.
- `serialize_diagnostics_ndjson()` returns one record per line and *does* end
  with a final ``\n`` (empty string for no diagnostics), which is convenient for
  CLI printing and piping.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from srcdiag.diagnostic.machine.schemas import (
    MachineDiagnosticEntry,
    MachineKey,
    MachineKind,
    MetaPayload,
    build_meta_payload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from srcdiag.diagnostic.model import SourceDiagnostic


def serialize_diagnostics_json(
    diagnostics: Iterable[SourceDiagnostic],
    *,
    meta: MetaPayload | None = None,
) -> str:
    """Serialize diagnostics as a single JSON envelope.

    Args:
        diagnostics: Diagnostics to serialize, in order.
        meta: Metadata block; built from the runtime when omitted.

    Returns:
        Pretty-printed JSON string (no trailing newline) shaped as
        ``{"meta": {...}, "diagnostics": [...]}``.
    """
    envelope: dict[str, object] = {
        MachineKey.META: dict(meta or build_meta_payload()),
        MachineKey.DIAGNOSTICS: [
            MachineDiagnosticEntry.from_diagnostic(d).to_dict() for d in diagnostics
        ],
    }
    return json.dumps(envelope, indent=2)


def iter_diagnostic_ndjson_records(
    diagnostics: Iterable[SourceDiagnostic],
    *,
    meta: MetaPayload | None = None,
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per diagnostic.

    Each record is shaped as
    ``{"kind": "diagnostic", "meta": {...}, "diagnostic": {...}}``.
    """
    meta_dict: dict[str, str] = dict(meta or build_meta_payload())
    for d in diagnostics:
        yield {
            MachineKey.KIND: MachineKind.DIAGNOSTIC,
            MachineKey.META: meta_dict,
            MachineKey.DIAGNOSTIC: MachineDiagnosticEntry.from_diagnostic(d).to_dict(),
        }


def serialize_diagnostics_ndjson(
    diagnostics: Iterable[SourceDiagnostic],
    *,
    meta: MetaPayload | None = None,
) -> str:
    """Serialize diagnostics as NDJSON (one compact JSON object per line).

    Args:
        diagnostics: Diagnostics to serialize, in order.
        meta: Metadata block; built from the runtime when omitted.

    Returns:
        The NDJSON text, ending with a newline unless empty.
    """
    return "".join(
        json.dumps(record, separators=(",", ":")) + "\n"
        for record in iter_diagnostic_ndjson_records(diagnostics, meta=meta)
    )
