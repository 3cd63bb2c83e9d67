# topmark:header:start
#
#   project      : SrcDiag
#   file         : location.py
#   file_relpath : src/srcdiag/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Offset to line/column resolution.

Front ends report failures as raw character offsets into a source text. This
module converts such an offset into a 0-based ``(line, column)`` pair and splits
source text into the lines used for context extracts.

Offsets count raw characters, including newline characters. Only ``"\\n"`` is
treated as a line break; a ``"\\r"`` preceding it belongs to the line.
"""

from __future__ import annotations

from typing import NamedTuple


class SourcePosition(NamedTuple):
    """A resolved position in a source text.

    Attributes:
        line: 0-based line index.
        column: 0-based character offset within the line.
    """

    line: int
    column: int


def resolve_location(offset: int, text: str) -> SourcePosition:
    """Resolve a raw character offset to a 0-based line and column.

    The line index equals the number of newline characters in ``text[:offset]``
    and the column is the distance from the start of that line. Offsets outside
    ``[0, len(text)]`` are clamped, so the call never fails for an out-of-range
    offset: offsets past the end resolve to the last line with the column
    clamped to that line's length.

    Only the first ``offset`` characters of ``text`` are scanned.

    Args:
        offset: Raw character offset into ``text``.
        text: The full source text.

    Returns:
        SourcePosition: The 0-based ``(line, column)`` pair.
    """
    offset = max(0, min(offset, len(text)))
    line: int = text.count("\n", 0, offset)
    line_start: int = text.rfind("\n", 0, offset) + 1
    return SourcePosition(line=line, column=offset - line_start)


def split_source_lines(text: str) -> list[str]:
    """Split source text into its lines.

    Every ``"\\n"`` opens a new line, so ``"a\\nb\\n"`` has three lines, the last one
    empty. This keeps one line per position `resolve_location` can return. A
    single trailing ``"\\r"`` is dropped from each line.

    Args:
        text: The full source text.

    Returns:
        list[str]: The lines, without line terminators.
    """
    return [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]


def line_at(lines: list[str], index: int) -> str | None:
    """Return ``lines[index]``, or None when ``index`` is out of range.

    Negative indexes are out of range (no wrap-around).
    """
    if 0 <= index < len(lines):
        return lines[index]
    return None
