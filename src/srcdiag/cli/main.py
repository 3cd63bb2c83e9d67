# topmark:header:start
#
#   project      : SrcDiag
#   file         : main.py
#   file_relpath : src/srcdiag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag command-line interface.

Key ideas:
- Group-level options (verbosity, color, settings file) are resolved once and
  placed into ``ctx.obj``.
- Subcommands read that shared state through `srcdiag.cli.cmd_common`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from srcdiag.cli.commands.locate import locate_command
from srcdiag.cli.commands.replay import replay_command
from srcdiag.cli.commands.report import report_command
from srcdiag.cli.commands.version import version_command
from srcdiag.cli.console import ClickConsole
from srcdiag.cli.errors import SrcDiagConfigError
from srcdiag.cli.keys import CtxKey
from srcdiag.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from srcdiag.cli_shared.color import ColorMode, resolve_color_mode
from srcdiag.config.logging import get_logger, resolve_env_log_level, setup_logging
from srcdiag.config.settings import Settings, load_settings
from srcdiag.errors import SettingsError

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, settings, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit settings file from ``--config``.

    Raises:
        SrcDiagConfigError: If the settings file is unreadable or invalid.
    """
    ctx.ensure_object(dict)

    ctx.obj[CtxKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q
    setup_logging(level=resolve_env_log_level())

    try:
        settings: Settings = load_settings(config_path)
    except SettingsError as e:
        raise SrcDiagConfigError(str(e)) from e

    cli_color: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    settings = settings.merged(color=cli_color)
    ctx.obj[CtxKey.SETTINGS] = settings

    enable_color: bool = resolve_color_mode(
        color_mode_override=settings.color,
        output_format=None,
    )
    ctx.color = enable_color
    ctx.obj[CtxKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SrcDiag: resolve and render source diagnostics.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ./srcdiag.toml or [tool.srcdiag] in ./pyproject.toml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the SrcDiag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'srcdiag report FILE --index N --message TEXT'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(locate_command)

cli.add_command(report_command)

cli.add_command(replay_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
