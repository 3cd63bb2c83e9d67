# topmark:header:start
#
#   project      : SrcDiag
#   file         : locate.py
#   file_relpath : src/srcdiag/cli/commands/locate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `locate` command.

Prints the 1-based line and 1-based display column for a raw character offset
into a file, e.g. ``2:11``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from srcdiag.cli.cmd_common import get_console, get_settings, load_source, resolve_output_format
from srcdiag.cli.options import output_format_option
from srcdiag.cli_shared.formats import OutputFormat
from srcdiag.diagnostic.machine.schemas import MachineKey, MachineKind, build_meta_payload
from srcdiag.location import resolve_location
from srcdiag.sources import SourceSession

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike
    from srcdiag.location import SourcePosition


@click.command(
    name="locate",
    help="Resolve a character OFFSET in FILE to line:column (both 1-based).",
)
@click.argument("file", type=str)
@click.argument("offset", type=click.IntRange(min=0))
@output_format_option
@click.pass_context
def locate_command(
    ctx: click.Context,
    file: str,
    offset: int,
    output_format: OutputFormat | None,
) -> None:
    """Resolve OFFSET in FILE and print the position.

    Args:
        ctx (click.Context): Click context.
        file (str): Source file to read.
        offset (int): Raw character offset (offsets past the end are clamped).
        output_format (OutputFormat | None): Output format; settings default when omitted.
    """
    console: ConsoleLike = get_console(ctx)
    session = SourceSession()
    key: str = load_source(session, file, encoding=get_settings(ctx).encoding)
    pos: SourcePosition = resolve_location(offset, session.contents[key])

    fmt: OutputFormat = resolve_output_format(ctx, output_format)
    if fmt.is_machine:
        record: dict[str, object] = {
            "file": file,
            "offset": offset,
            "line": pos.line + 1,
            "column": pos.column,
        }
        if fmt == OutputFormat.NDJSON:
            console.print(
                json.dumps(
                    {
                        MachineKey.KIND: MachineKind.LOCATION,
                        MachineKey.META: dict(build_meta_payload()),
                        MachineKey.LOCATION: record,
                    },
                    separators=(",", ":"),
                )
            )
        else:
            console.print(
                json.dumps(
                    {MachineKey.META: dict(build_meta_payload()), MachineKey.LOCATION: record},
                    indent=2,
                )
            )
        return

    console.print(f"{pos.line + 1}:{pos.column + 1}")
