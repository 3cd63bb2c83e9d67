# topmark:header:start
#
#   project      : SrcDiag
#   file         : errors.py
#   file_relpath : src/srcdiag/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for SrcDiag.

Diagnostics themselves are data and are never raised while being built. The
exceptions here cover the few places where the library does fail:

- `ConfigurationError`: a render configuration is unusable (non-callable `stylize`).
- `SettingsError`: a settings file is malformed or holds invalid values.
- `SourceDiagnosticError`: a raisable wrapper around an already-built diagnostic,
  for callers that want to propagate it through ``raise``.

CLI-specific exceptions (with exit codes) live in `srcdiag.cli.errors`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from srcdiag.diagnostic.model import SourceDiagnostic


class SrcDiagError(Exception):
    """Base class for all SrcDiag library errors."""


class ConfigurationError(SrcDiagError, TypeError):
    """A render configuration was supplied with an unusable value."""


class SettingsError(SrcDiagError, ValueError):
    """A settings file could not be parsed or contains invalid values."""


class SourceDiagnosticError(SrcDiagError):
    """Exception carrying a `SourceDiagnostic`.

    ``str(exc)`` is the plain (unstyled) rendering of the diagnostic, so the
    exception prints usefully through standard tracebacks.

    Attributes:
        diagnostic: The wrapped diagnostic.
    """

    diagnostic: SourceDiagnostic

    def __init__(self, diagnostic: SourceDiagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)
