# topmark:header:start
#
#   project      : SrcDiag
#   file         : cmd_common.py
#   file_relpath : src/srcdiag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by SrcDiag subcommands.

These helpers read the shared state initialized by the group callback
(console, settings, verbosity) from ``ctx.obj`` and implement the common
"load sources → build diagnostics → emit" tail of the commands.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from srcdiag.cli.errors import SrcDiagFileNotFoundError, SrcDiagIOError
from srcdiag.cli.keys import CtxKey
from srcdiag.cli_shared.color import resolve_color_mode
from srcdiag.cli_shared.formats import OutputFormat
from srcdiag.config.logging import get_logger
from srcdiag.config.settings import Settings
from srcdiag.diagnostic.machine.serializers import (
    serialize_diagnostics_json,
    serialize_diagnostics_ndjson,
)
from srcdiag.rendering.report import render_diagnostic
from srcdiag.rendering.styles import RenderConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srcdiag.cli_shared.console_api import ConsoleLike
    from srcdiag.config.logging import SrcDiagLogger
    from srcdiag.diagnostic.model import SourceDiagnostic
    from srcdiag.sources import SourceSession


logger: SrcDiagLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context."""
    return ctx.obj[CtxKey.CONSOLE]


def get_settings(ctx: click.Context) -> Settings:
    """Return the effective settings stored on the Click context (defaults if unset)."""
    settings: object = ctx.obj.get(CtxKey.SETTINGS)
    return settings if isinstance(settings, Settings) else Settings()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity level (logging-style integer)."""
    level: object = ctx.obj.get(CtxKey.VERBOSITY_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def resolve_output_format(ctx: click.Context, output_format: OutputFormat | None) -> OutputFormat:
    """Return the command's output format: CLI flag first, then settings."""
    return output_format or get_settings(ctx).output_format


def load_source(session: SourceSession, path: str, *, encoding: str) -> str:
    """Load ``path`` into ``session`` under its given name, mapping errors to CLI errors.

    Raises:
        SrcDiagFileNotFoundError: If ``path`` does not exist.
        SrcDiagIOError: If ``path`` cannot be read or decoded.
    """
    try:
        return session.load(Path(path), filename=path, encoding=encoding)
    except FileNotFoundError as e:
        raise SrcDiagFileNotFoundError(f"No such file: {path}") from e
    except UnicodeDecodeError as e:
        raise SrcDiagIOError(f"Cannot decode {path} as {encoding}: {e.reason}") from e
    except OSError as e:
        raise SrcDiagIOError(f"Cannot read {path}: {e.strerror or e}") from e


def emit_diagnostics(
    ctx: click.Context,
    diagnostics: Sequence[SourceDiagnostic],
    output_format: OutputFormat,
) -> None:
    """Write diagnostics to the console in the requested format.

    Human output is styled with yachalk when color is enabled for this run;
    machine formats are never styled.
    """
    console: ConsoleLike = get_console(ctx)
    if output_format == OutputFormat.JSON:
        console.print(serialize_diagnostics_json(diagnostics))
        return
    if output_format == OutputFormat.NDJSON:
        console.print(serialize_diagnostics_ndjson(diagnostics), nl=False)
        return

    enable_color: bool = resolve_color_mode(
        color_mode_override=get_settings(ctx).color,
        output_format=output_format.value,
    )
    config: RenderConfig = RenderConfig.for_color(enable_color and console.enable_color)
    for index, diagnostic in enumerate(diagnostics):
        if index:
            console.print()
        console.print(render_diagnostic(diagnostic, config), nl=False)
        if diagnostic.stack and get_effective_verbosity(ctx) <= logging.DEBUG:
            console.print(console.styled(diagnostic.stack, dim=True))
