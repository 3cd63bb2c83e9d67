# topmark:header:start
#
#   project      : SrcDiag
#   file         : keys.py
#   file_relpath : src/srcdiag/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keys used in the Click context object (``ctx.obj``)."""

from __future__ import annotations

from typing import Final


class CtxKey:
    """Canonical keys for values stored on ``click.Context.obj``."""

    CONSOLE: Final[str] = "console"
    SETTINGS: Final[str] = "settings"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
