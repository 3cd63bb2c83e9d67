# topmark:header:start
#
#   project      : SrcDiag
#   file         : replay.py
#   file_relpath : src/srcdiag/cli/commands/replay.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `replay` command.

Reads raw failure descriptions as JSON (one object or a list of objects, in the
boundary shape ``{type?, filename?, index?, message, call?, stack?}``) and
renders a diagnostic for each. Files named by the failures are read relative
to the working directory; unreadable files are logged and the corresponding
diagnostics degrade to message-only reports.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from srcdiag.cli.cmd_common import (
    emit_diagnostics,
    get_settings,
    resolve_output_format,
)
from srcdiag.cli.errors import SrcDiagDataError, SrcDiagIOError
from srcdiag.cli.options import output_format_option
from srcdiag.config.logging import get_logger
from srcdiag.diagnostic.model import RawFailure, SourceDiagnostic, build_diagnostic
from srcdiag.sources import SourceSession

if TYPE_CHECKING:
    from typing import TextIO

    from srcdiag.cli_shared.formats import OutputFormat
    from srcdiag.config.logging import SrcDiagLogger
    from srcdiag.config.settings import Settings

logger: SrcDiagLogger = get_logger(__name__)


def parse_failures(text: str) -> list[RawFailure]:
    """Parse failure JSON into raw failures.

    Args:
        text: JSON text holding one failure object or a list of them.

    Returns:
        The raw failures, in input order.

    Raises:
        SrcDiagDataError: If the text is not JSON, or not an object/list of objects.
    """
    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        raise SrcDiagDataError(f"Invalid failure JSON: {e}") from e
    items: list[object] = data if isinstance(data, list) else [data]
    failures: list[RawFailure] = []
    for pos, item in enumerate(items):
        if not isinstance(item, dict):
            raise SrcDiagDataError(
                f"Failure #{pos + 1} must be a JSON object, got {type(item).__name__}"
            )
        failures.append(RawFailure.from_mapping(item))
    return failures


def load_referenced_sources(
    failures: list[RawFailure],
    *,
    fallback_filename: str | None,
    encoding: str,
) -> SourceSession:
    """Read every file referenced by ``failures`` into a new session.

    Unreadable files are logged and skipped.
    """
    session = SourceSession()
    names: list[str] = []
    for failure in failures:
        name: str | None = failure.filename or fallback_filename
        if name and name not in names:
            names.append(name)
    for name in names:
        try:
            session.load(name, filename=name, encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot load source %s: %s", name, e)
    return session


@click.command(
    name="replay",
    help="Render diagnostics for raw failures read as JSON from FAILURES ('-' for STDIN).",
)
@click.argument("failures_file", metavar="FAILURES", type=click.File("r", encoding="utf-8"))
@click.option(
    "--fallback-filename",
    "fallback_filename",
    type=str,
    default=None,
    help="File to attribute failures to when they name none.",
)
@output_format_option
@click.pass_context
def replay_command(
    ctx: click.Context,
    failures_file: TextIO,
    fallback_filename: str | None,
    output_format: OutputFormat | None,
) -> None:
    """Replay raw failures from JSON.

    Args:
        ctx (click.Context): Click context.
        failures_file (TextIO): Opened FAILURES stream.
        fallback_filename (str | None): Overrides the settings' fallback filename.
        output_format (OutputFormat | None): Output format; settings default when omitted.
    """
    settings: Settings = get_settings(ctx)
    fallback: str | None = fallback_filename or settings.fallback_filename

    try:
        text: str = failures_file.read()
    except UnicodeDecodeError as e:
        raise SrcDiagIOError(f"Cannot decode {failures_file.name} as utf-8: {e.reason}") from e
    failures: list[RawFailure] = parse_failures(text)
    session: SourceSession = load_referenced_sources(
        failures, fallback_filename=fallback, encoding=settings.encoding
    )
    diagnostics: list[SourceDiagnostic] = [
        build_diagnostic(failure, session, fallback) for failure in failures
    ]
    logger.debug("Replayed %d failure(s) against %d source(s)", len(failures), len(session))
    emit_diagnostics(ctx, diagnostics, resolve_output_format(ctx, output_format))
