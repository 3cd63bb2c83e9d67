# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for SrcDiag: logging setup and settings files."""

from __future__ import annotations
