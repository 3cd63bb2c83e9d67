# topmark:header:start
#
#   project      : SrcDiag
#   file         : model.py
#   file_relpath : src/srcdiag/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and construction.

Sections:
    * RawFailure: tolerant view of an upstream failure description.
    * SourceDiagnostic: immutable structured diagnostic with resolved position.
    * build_diagnostic: the constructor tying both together.

Construction is defensive: it never raises, whatever shape the raw failure has.
Fields that cannot be determined stay ``None``. Position resolution either
fully succeeds or is fully skipped: when the source text of the failing file is
unavailable, no positional field is populated.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from srcdiag.config.logging import get_logger
from srcdiag.constants import DEFAULT_KIND
from srcdiag.diagnostic.machine.schemas import MachineDiagnosticEntry
from srcdiag.errors import SourceDiagnosticError
from srcdiag.location import SourcePosition, line_at, resolve_location, split_source_lines
from srcdiag.rendering.report import render_diagnostic

if TYPE_CHECKING:
    from srcdiag.config.logging import SrcDiagLogger
    from srcdiag.sources import SourceLookup


logger: SrcDiagLogger = get_logger(__name__)

Extract = tuple[str | None, str | None, str | None]

EMPTY_EXTRACT: Extract = (None, None, None)


def _opt_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _opt_offset(value: object) -> int | None:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


@dataclass(frozen=True, slots=True)
class RawFailure:
    """Failure description as handed over by a parser or import manager.

    Attributes mirror the boundary shape
    ``{type?, filename?, index?, message, call?, stack?}``; ``kind`` holds
    ``type``. All fields are optional.
    """

    kind: str | None = None
    filename: str | None = None
    index: int | None = None
    message: str | None = None
    call: int | None = None
    stack: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[object, object]) -> RawFailure:
        """Create a RawFailure from a boundary mapping.

        Values of an unexpected type are dropped (treated as absent).

        Args:
            data: Mapping using the boundary keys (``type``, ``filename``,
                ``index``, ``message``, ``call``, ``stack``).

        Returns:
            The corresponding RawFailure.
        """
        return cls(
            kind=_opt_str(data.get("type")),
            filename=_opt_str(data.get("filename")),
            index=_opt_offset(data.get("index")),
            message=_opt_str(data.get("message")),
            call=_opt_offset(data.get("call")),
            stack=_opt_str(data.get("stack")),
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> RawFailure:
        """Create a RawFailure from an exception raised by a front end.

        Attributes named like the boundary keys are honored when present.
        Otherwise the message falls back to ``str(exc)`` and the stack to the
        formatted traceback (if the exception was raised).
        """
        message: str | None = _opt_str(getattr(exc, "message", None))
        if message is None:
            message = str(exc)
        stack: str | None = _opt_str(getattr(exc, "stack", None))
        if stack is None and exc.__traceback__ is not None:
            stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(
            kind=_opt_str(getattr(exc, "type", None)),
            filename=_opt_str(getattr(exc, "filename", None)),
            index=_opt_offset(getattr(exc, "index", None)),
            message=message,
            call=_opt_offset(getattr(exc, "call", None)),
            stack=stack,
        )

    @classmethod
    def coerce(cls, obj: object) -> RawFailure:
        """Normalize any failure description into a RawFailure.

        Accepts a RawFailure, a mapping, an exception, or any object exposing
        the boundary attributes. Never raises.
        """
        if isinstance(obj, RawFailure):
            return obj
        if isinstance(obj, Mapping):
            return cls.from_mapping(obj)
        if isinstance(obj, BaseException):
            return cls.from_exception(obj)
        if obj is None:
            logger.debug("No failure description given; building an empty diagnostic")
            return cls()
        return cls(
            kind=_opt_str(getattr(obj, "type", None)),
            filename=_opt_str(getattr(obj, "filename", None)),
            index=_opt_offset(getattr(obj, "index", None)),
            message=_opt_str(getattr(obj, "message", None)),
            call=_opt_offset(getattr(obj, "call", None)),
            stack=_opt_str(getattr(obj, "stack", None)),
        )


@dataclass(frozen=True, slots=True)
class SourceDiagnostic:
    """Structured description of one detected failure.

    Instances are plain immutable values: they perform no I/O after
    construction and can be rendered any number of times. Use
    `build_diagnostic` rather than instantiating directly.

    Attributes:
        kind: Error category (``"Syntax"`` unless the failure names one).
        filename: Source file the failure is attributed to.
        offset: Raw character offset into ``filename``'s text.
        line: 1-based line of the failure.
        column: 0-based column of the failure.
        call_line: 1-based line of the inclusion that led to the failing file.
        call_extract: Text of the line at ``call_line``.
        extract: Lines ``line - 1``, ``line``, ``line + 1``; ``None`` where a
            line does not exist (distinct from an empty line).
        message: Failure message, verbatim.
        stack: Stack trace, verbatim.
    """

    kind: str = DEFAULT_KIND
    filename: str | None = None
    offset: int | None = None
    line: int | None = None
    column: int | None = None
    call_line: int | None = None
    call_extract: str | None = None
    extract: Extract = field(default=EMPTY_EXTRACT)
    message: str | None = None
    stack: str | None = None

    @property
    def has_position(self) -> bool:
        """Return True if the failure position was resolved."""
        return self.line is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this diagnostic (machine-output shape)."""
        return MachineDiagnosticEntry.from_diagnostic(self).to_dict()

    def to_exception(self) -> SourceDiagnosticError:
        """Return an exception wrapping this diagnostic, ready to be raised."""
        return SourceDiagnosticError(self)

    def __str__(self) -> str:
        return render_diagnostic(self)


def build_diagnostic(
    raw: object,
    source_lookup: SourceLookup | None = None,
    fallback_filename: str | None = None,
) -> SourceDiagnostic:
    """Build a `SourceDiagnostic` from a raw failure description.

    The failing file is ``raw.filename`` or, failing that, ``fallback_filename``.
    Its position is resolved only when ``source_lookup`` holds that file and the
    failure carries an offset. The ``call`` offset, if any, is resolved against
    the same text, since the inclusion site lives in the including file.

    Args:
        raw: Failure description (see `RawFailure.coerce` for accepted shapes).
        source_lookup: Collaborator mapping filenames to source text.
        fallback_filename: File to attribute the failure to when ``raw`` names none.

    Returns:
        SourceDiagnostic: The (possibly partially populated) diagnostic.
    """
    failure: RawFailure = RawFailure.coerce(raw)
    kind: str = failure.kind or DEFAULT_KIND
    filename: str | None = failure.filename or fallback_filename

    text: str | None = None
    if source_lookup is not None and filename:
        contents = getattr(source_lookup, "contents", None)
        if isinstance(contents, Mapping):
            candidate: object = contents.get(filename)
            text = candidate if isinstance(candidate, str) else None
        if text is None:
            logger.debug("No source text for %r; diagnostic has no position", filename)

    if text is None or failure.index is None:
        if text is not None:
            logger.debug("Failure in %r carries no offset; position not resolved", filename)
        return SourceDiagnostic(
            kind=kind,
            filename=filename,
            offset=failure.index,
            message=failure.message,
            stack=failure.stack,
        )

    lines: list[str] = split_source_lines(text)
    pos: SourcePosition = resolve_location(failure.index, text)

    call_line: int | None = None
    call_extract: str | None = None
    if failure.call is not None:
        call_pos: SourcePosition = resolve_location(failure.call, text)
        call_line = call_pos.line + 1
        call_extract = line_at(lines, call_pos.line)

    extract: Extract = (
        line_at(lines, pos.line - 1),
        line_at(lines, pos.line),
        line_at(lines, pos.line + 1),
    )
    logger.trace(
        "Resolved offset %d in %r to line %d, column %d",
        failure.index,
        filename,
        pos.line + 1,
        pos.column,
    )
    return SourceDiagnostic(
        kind=kind,
        filename=filename,
        offset=failure.index,
        line=pos.line + 1,
        column=pos.column,
        call_line=call_line,
        call_extract=call_extract,
        extract=extract,
        message=failure.message,
        stack=failure.stack,
    )
