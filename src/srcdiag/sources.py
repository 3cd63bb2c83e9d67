# topmark:header:start
#
#   project      : SrcDiag
#   file         : sources.py
#   file_relpath : src/srcdiag/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source lookup collaborators.

Diagnostic construction reads source text through a `SourceLookup`: any object
exposing a ``contents`` mapping from filename to full source text. The import
manager of a front end typically already satisfies this protocol.

`SourceSession` is a small in-memory implementation used by the CLI and tests.
Lookups are by exact key; no path normalization is applied.

Thread safety:
    Diagnostic construction only reads ``contents``. A session shared between
    threads must not be mutated while diagnostics are being built from it.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from srcdiag.config.logging import get_logger
from srcdiag.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from srcdiag.config.logging import SrcDiagLogger


logger: SrcDiagLogger = get_logger(__name__)


class SourceLookup(Protocol):
    """Structural interface for objects mapping filenames to source text."""

    @property
    def contents(self) -> Mapping[str, str]:
        """Mapping from filename to the full source text of that file."""
        ...


class SourceSession:
    """In-memory `SourceLookup` for one processing session.

    Files are registered under the name the caller uses to refer to them
    (usually the name the front end reports in its failures).
    """

    def __init__(self, contents: Mapping[str, str] | None = None) -> None:
        self._contents: dict[str, str] = dict(contents or {})

    @property
    def contents(self) -> Mapping[str, str]:
        """Read-only view of the registered sources."""
        return MappingProxyType(self._contents)

    def add(self, filename: str, text: str) -> None:
        """Register (or replace) the source text for ``filename``.

        Args:
            filename: Lookup key.
            text: Full source text.
        """
        self._contents[filename] = text
        logger.trace("Registered source %r (%d chars)", filename, len(text))

    def load(
        self,
        path: str | Path,
        *,
        filename: str | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> str:
        """Read a file from disk and register its text.

        Newlines are preserved as-is so offsets reported by a front end that
        read the same bytes stay valid.

        Args:
            path: File to read.
            filename: Lookup key; defaults to ``str(path)``.
            encoding: Text encoding of the file.

        Returns:
            str: The lookup key the text was registered under.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid in ``encoding``.
        """
        key: str = filename if filename is not None else str(path)
        with Path(path).open("r", encoding=encoding, newline="") as fh:
            text: str = fh.read()
        self.add(key, text)
        return key

    def __contains__(self, filename: object) -> bool:
        return filename in self._contents

    def __len__(self) -> int:
        return len(self._contents)
