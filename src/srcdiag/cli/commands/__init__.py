# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the SrcDiag CLI."""

from __future__ import annotations
