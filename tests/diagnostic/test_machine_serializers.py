# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_machine_serializers.py
#   file_relpath : tests/diagnostic/test_machine_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON and NDJSON serialization of diagnostics."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from srcdiag.diagnostic import build_diagnostic
from srcdiag.diagnostic.machine import (
    MachineDiagnosticEntry,
    build_meta_payload,
    serialize_diagnostics_json,
    serialize_diagnostics_ndjson,
)
from srcdiag.diagnostic.machine.schemas import MetaPayload

if TYPE_CHECKING:
    from srcdiag.diagnostic import SourceDiagnostic
    from srcdiag.sources import SourceSession

META: MetaPayload = MetaPayload(tool="srcdiag", version="0.0.0", platform="test")


def _diagnostics(session: SourceSession) -> list[SourceDiagnostic]:
    return [
        build_diagnostic({"filename": "a.less", "index": 17, "message": "first"}, session),
        build_diagnostic({"message": "second", "stack": "at x"}, session),
    ]


def test_meta_payload_names_the_tool() -> None:
    meta: MetaPayload = build_meta_payload()
    assert meta["tool"] == "srcdiag"
    assert isinstance(meta["version"], str)
    assert isinstance(meta["platform"], str)


def test_entry_mirrors_public_fields(sample_session: SourceSession) -> None:
    """Machine entries carry every public field, with the extract as a list."""
    diag = build_diagnostic(
        {"filename": "a.less", "index": 17, "message": "m"}, sample_session
    )
    entry: dict[str, object] = MachineDiagnosticEntry.from_diagnostic(diag).to_dict()

    assert entry == {
        "kind": "Syntax",
        "filename": "a.less",
        "offset": 17,
        "line": 2,
        "column": 10,
        "call_line": None,
        "call_extract": None,
        "extract": ["body {", "  color: red;", "}"],
        "message": "m",
        "stack": None,
    }
    assert diag.to_dict() == entry


def test_json_envelope(sample_session: SourceSession) -> None:
    """The JSON envelope holds the meta block and all diagnostics in order."""
    payload: dict[str, Any] = json.loads(
        serialize_diagnostics_json(_diagnostics(sample_session), meta=META)
    )

    assert payload["meta"] == dict(META)
    assert [d["message"] for d in payload["diagnostics"]] == ["first", "second"]
    assert payload["diagnostics"][1]["extract"] == [None, None, None]


def test_json_has_no_trailing_newline(sample_session: SourceSession) -> None:
    text: str = serialize_diagnostics_json(_diagnostics(sample_session), meta=META)
    assert not text.endswith("\n")


def test_ndjson_emits_one_record_per_line(sample_session: SourceSession) -> None:
    text: str = serialize_diagnostics_ndjson(_diagnostics(sample_session), meta=META)

    assert text.endswith("\n")
    lines: list[str] = text.splitlines()
    assert len(lines) == 2
    records: list[dict[str, Any]] = [json.loads(line) for line in lines]
    assert all(r["kind"] == "diagnostic" for r in records)
    assert all(r["meta"] == dict(META) for r in records)
    assert records[0]["diagnostic"]["line"] == 2
    assert records[1]["diagnostic"]["stack"] == "at x"


def test_ndjson_is_empty_for_no_diagnostics() -> None:
    assert serialize_diagnostics_ndjson([], meta=META) == ""
