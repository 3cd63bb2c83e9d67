# topmark:header:start
#
#   project      : SrcDiag
#   file         : report.py
#   file_relpath : src/srcdiag/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `report` command.

Builds a single diagnostic from command-line options and renders it against
the text of FILE::

    srcdiag report a.less --index 17 --message "Unrecognised input"
"""

from __future__ import annotations

import click

from srcdiag.cli.cmd_common import (
    emit_diagnostics,
    get_settings,
    load_source,
    resolve_output_format,
)
from srcdiag.cli.options import output_format_option
from srcdiag.cli_shared.formats import OutputFormat
from srcdiag.config.logging import get_logger
from srcdiag.diagnostic.model import RawFailure, SourceDiagnostic, build_diagnostic
from srcdiag.sources import SourceSession

logger = get_logger(__name__)


@click.command(
    name="report",
    help="Render a diagnostic for a failure at character offset --index in FILE.",
)
@click.argument("file", type=str)
@click.option(
    "--index",
    "index",
    type=click.IntRange(min=0),
    required=True,
    help="Raw character offset of the failure in FILE.",
)
@click.option("--message", "message", type=str, required=True, help="Failure message.")
@click.option(
    "--kind",
    "kind",
    type=str,
    default=None,
    help="Error category (rendered as '<KIND>Error'); default: Syntax.",
)
@click.option(
    "--call",
    "call",
    type=click.IntRange(min=0),
    default=None,
    help="Offset in FILE of the inclusion that led to the failure.",
)
@click.option("--stack", "stack", type=str, default=None, help="Stack trace to attach.")
@output_format_option
@click.pass_context
def report_command(
    ctx: click.Context,
    file: str,
    index: int,
    message: str,
    kind: str | None,
    call: int | None,
    stack: str | None,
    output_format: OutputFormat | None,
) -> None:
    """Build and emit one diagnostic.

    Args:
        ctx (click.Context): Click context.
        file (str): Source file the failure occurred in.
        index (int): Raw character offset of the failure.
        message (str): Failure message.
        kind (str | None): Error category.
        call (int | None): Offset of the triggering inclusion, if any.
        stack (str | None): Stack trace, if any.
        output_format (OutputFormat | None): Output format; settings default when omitted.
    """
    session = SourceSession()
    key: str = load_source(session, file, encoding=get_settings(ctx).encoding)
    raw = RawFailure(
        kind=kind,
        filename=key,
        index=index,
        message=message,
        call=call,
        stack=stack,
    )
    diagnostic: SourceDiagnostic = build_diagnostic(raw, session)
    logger.debug("Built diagnostic for %s: line=%s", key, diagnostic.line)
    emit_diagnostics(ctx, [diagnostic], resolve_output_format(ctx, output_format))
