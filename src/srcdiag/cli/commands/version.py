# topmark:header:start
#
#   project      : SrcDiag
#   file         : version.py
#   file_relpath : src/srcdiag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `version` command.

Prints the current SrcDiag version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from srcdiag.cli.cmd_common import get_console
from srcdiag.cli.options import output_format_option
from srcdiag.cli_shared.formats import OutputFormat
from srcdiag.constants import SRCDIAG_VERSION
from srcdiag.diagnostic.machine.schemas import MachineKey, MachineKind, build_meta_payload

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SrcDiag.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Show the current version of SrcDiag.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({MachineKey.VERSION: SRCDIAG_VERSION}))
    elif fmt == OutputFormat.NDJSON:
        console.print(
            json.dumps(
                {
                    MachineKey.KIND: MachineKind.VERSION,
                    MachineKey.META: dict(build_meta_payload()),
                    MachineKey.VERSION: SRCDIAG_VERSION,
                },
                separators=(",", ":"),
            )
        )
    else:
        console.print(console.styled(SRCDIAG_VERSION, bold=True))
