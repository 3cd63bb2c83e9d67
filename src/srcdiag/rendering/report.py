# topmark:header:start
#
#   project      : SrcDiag
#   file         : report.py
#   file_relpath : src/srcdiag/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of source diagnostics.

A report looks like this (identity styling)::

    SyntaxError: missing closing `}` in a.less on line 2, column 11:
    1 body {
    2   color: red;
    3 }

followed, for failures inside an included file, by the inclusion site::

    from main.less
    4 @import "a.less";

Rendering is a pure function of the diagnostic and the configuration, and it
only reads public diagnostic fields. Missing fields are skipped rather than
reported, so partially populated diagnostics render without errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from srcdiag.errors import ConfigurationError
from srcdiag.rendering.styles import RenderConfig, StyleName, Stylizer, identity_stylize

if TYPE_CHECKING:
    from srcdiag.diagnostic.model import SourceDiagnostic


def resolve_stylizer(config: RenderConfig | Mapping[str, object] | None) -> Stylizer:
    """Return the stylize strategy held by ``config``.

    Args:
        config: A `RenderConfig`, a mapping with an optional ``"stylize"`` key,
            or None.

    Returns:
        Stylizer: The configured strategy, or identity when none is set.

    Raises:
        ConfigurationError: If a ``stylize`` value is set but is not callable.
    """
    if config is None:
        return identity_stylize
    stylize: object = (
        config.get("stylize") if isinstance(config, Mapping) else getattr(config, "stylize", None)
    )
    if stylize is None:
        return identity_stylize
    if not callable(stylize):
        raise ConfigurationError(
            f"stylize must be a function, got a {type(stylize).__name__}"
        )
    return cast("Stylizer", stylize)


def _render_error_line(diagnostic: SourceDiagnostic, text: str, stylize: Stylizer) -> str:
    # Text before the column stays plain; the column character is highlighted
    # and the rest of the line carries the error style.
    prefix: str = f"{diagnostic.line} "
    if not text:
        return prefix
    column: int = diagnostic.column or 0
    highlight: str = stylize(text[column : column + 1], StyleName.BOLD.value)
    tail: str = stylize(highlight + text[column + 1 :], StyleName.RED.value)
    return prefix + text[:column] + stylize(tail, StyleName.INVERSE.value)


def render_context(diagnostic: SourceDiagnostic, stylize: Stylizer) -> str:
    """Render the source extract block (terminated by a reset marker and a newline)."""
    before, current, after = diagnostic.extract
    line: int = diagnostic.line or 0
    lines: list[str] = []
    if before is not None:
        lines.append(stylize(f"{line - 1} {before}", StyleName.GREY.value))
    if current is not None:
        lines.append(_render_error_line(diagnostic, current, stylize))
    if after is not None:
        lines.append(stylize(f"{line + 1} {after}", StyleName.GREY.value))
    return "\n".join(lines) + stylize("", StyleName.RESET.value) + "\n"


def render_header(diagnostic: SourceDiagnostic, stylize: Stylizer) -> str:
    """Render the ``<kind>Error: <message>`` header line (without newline)."""
    message: str = diagnostic.message if diagnostic.message is not None else ""
    header: str = stylize(f"{diagnostic.kind}Error: {message}", StyleName.RED.value)
    if diagnostic.filename:
        header += stylize(" in ", StyleName.RED.value) + diagnostic.filename
        if diagnostic.line is not None:
            column: int = (diagnostic.column or 0) + 1
            header += stylize(
                f" on line {diagnostic.line}, column {column}:", StyleName.GREY.value
            )
    return header


def render_call_site(diagnostic: SourceDiagnostic, stylize: Stylizer) -> str:
    """Render the inclusion-site block, or an empty string when there is none."""
    if diagnostic.call_line is None:
        return ""
    call_extract: str = diagnostic.call_extract if diagnostic.call_extract is not None else ""
    return (
        stylize("from ", StyleName.RED.value)
        + (diagnostic.filename or "")
        + "\n"
        + stylize(str(diagnostic.call_line), StyleName.GREY.value)
        + " "
        + call_extract
        + "\n"
    )


def render_diagnostic(
    diagnostic: SourceDiagnostic,
    config: RenderConfig | Mapping[str, object] | None = None,
) -> str:
    """Render a diagnostic as a multi-line, optionally styled report.

    The configuration is validated before any text is produced; this is the
    only way rendering can fail.

    Args:
        diagnostic: The diagnostic to render.
        config: Styling configuration; identity styling when omitted.

    Returns:
        str: The report, ending with a newline.

    Raises:
        ConfigurationError: If ``config`` holds a non-callable ``stylize``.
    """
    stylize: Stylizer = resolve_stylizer(config)
    return (
        render_header(diagnostic, stylize)
        + "\n"
        + render_context(diagnostic, stylize)
        + render_call_site(diagnostic, stylize)
    )
