# topmark:header:start
#
#   project      : SrcDiag
#   file         : color.py
#   file_relpath : src/srcdiag/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for SrcDiag.

This module provides:

- ColorMode enum (``--color``, ``--no-color`` and the ``color`` setting).
- `resolve_color_mode`, the single decision whether a run emits ANSI styling.

The decision feeds two places: the `srcdiag.cli.console.ClickConsole` created
by the group callback (error and stack styling via Click), and
`srcdiag.rendering.styles.RenderConfig.for_color`, which picks yachalk's
`chalk_stylize` or identity styling for rendered diagnostics. JSON and NDJSON
output never reach the stylizer, so machine formats always resolve to no color.

These helpers stay Click-free so library callers can choose a stylizer the
same way the CLI does.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from srcdiag.config.logging import get_logger

if TYPE_CHECKING:
    from srcdiag.config.logging import SrcDiagLogger


logger: SrcDiagLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,  # "default" | "json" | "ndjson" | None
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is `"json"` or `"ndjson"`, return False.
        2. **Override**: If `color_mode_override` is `ALWAYS` → True; if `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Color mode from the CLI or settings file;
            `None` means “not provided”.
        output_format: Structured output mode; `"json"` or `"ndjson"` suppress color.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: stdout_isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
