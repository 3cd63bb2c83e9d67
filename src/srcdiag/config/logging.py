# topmark:header:start
#
#   project      : SrcDiag
#   file         : logging.py
#   file_relpath : src/srcdiag/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom SrcDiag logging with TRACE logging.

This module extends the standard logging module with SrcDiag-specific features:
a TRACE level below DEBUG, the `SrcDiagLogger` class exposing ``trace()``, and
a yachalk `ChalkFormatter` that colors records by severity.

Logging is reserved for internal diagnostics of the library itself. Rendered
reports are program output and go through the CLI console instead. What the
project logs, by level:

- TRACE: each resolved offset in `srcdiag.diagnostic.model` and each source
  registered on a `srcdiag.sources.SourceSession`.
- DEBUG: lookup misses and failures without an offset (the diagnostic then has
  no position), settings discovery, and per-command summaries.
- WARNING: unknown settings keys, and sources named by ``replay`` input that
  cannot be read.

The level comes from the ``SRCDIAG_LOG_LEVEL`` environment variable and is
independent of the CLI's ``-v``/``-q`` flags, which only control how much of a
report is printed (e.g. the attached stack trace at ``-vv``). Without the
variable only CRITICAL records are shown, so a report on stdout is never mixed
with log noise on stderr.

Example:
    ```sh
    SRCDIAG_LOG_LEVEL=trace srcdiag report a.less --index 17 --message "Unrecognised input"
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "SRCDIAG_LOG_LEVEL"


class SrcDiagLogger(logging.Logger):
    """Custom logger class for SrcDiag with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SrcDiagLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors SRCDIAG_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Log to stderr so rendered reports on stdout stay clean
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> SrcDiagLogger:
    """Retrieve a SrcDiagLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        SrcDiagLogger: A SrcDiagLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("SrcDiagLogger", logger)
