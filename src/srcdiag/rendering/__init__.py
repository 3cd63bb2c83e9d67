# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of diagnostics into human-facing reports.

The renderer is decoupled from any color library: styling is a strategy value
(`RenderConfig.stylize`) that defaults to identity. `chalk_stylize` provides
ANSI styling through yachalk.
"""

from __future__ import annotations

from srcdiag.rendering.report import render_diagnostic, resolve_stylizer
from srcdiag.rendering.styles import (
    RenderConfig,
    StyleName,
    Stylizer,
    chalk_stylize,
    identity_stylize,
)

__all__ = [
    "RenderConfig",
    "StyleName",
    "Stylizer",
    "chalk_stylize",
    "identity_stylize",
    "render_diagnostic",
    "resolve_stylizer",
]
