# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (color, formats, exit codes)."""

from __future__ import annotations
