# topmark:header:start
#
#   project      : SrcDiag
#   file         : errors.py
#   file_relpath : src/srcdiag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for SrcDiag CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from srcdiag.cli.keys import CtxKey
from srcdiag.cli_shared.exit_codes import ExitCode


class SrcDiagCliError(click.ClickException):
    """Base class for all SrcDiag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get(CtxKey.CONSOLE)
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SrcDiagUsageError(SrcDiagCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SrcDiagDataError(SrcDiagCliError):
    """Error for malformed input data (e.g. failure JSON that is not an object/list)."""

    exit_code = ExitCode.DATA_ERROR


class SrcDiagFileNotFoundError(SrcDiagCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SrcDiagIOError(SrcDiagCliError):
    """Error for I/O or decoding errors while reading inputs."""

    exit_code = ExitCode.IO_ERROR


class SrcDiagConfigError(SrcDiagCliError):
    """Error for settings errors (missing/invalid/malformed settings file)."""

    exit_code = ExitCode.CONFIG_ERROR
