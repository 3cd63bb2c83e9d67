# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag CLI package.

This package groups all Click command definitions and supporting utilities
for the SrcDiag command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        srcdiag = "srcdiag.cli.main:cli"

All subcommands live in [`srcdiag.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
