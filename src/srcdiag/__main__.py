# topmark:header:start
#
#   project      : SrcDiag
#   file         : __main__.py
#   file_relpath : src/srcdiag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SrcDiag via ``python -m srcdiag``.

Delegates directly to `srcdiag.cli.main.cli`, equivalent to running the
``srcdiag`` console script.

Examples:
    Render a diagnostic for offset 17 of ``a.less``::

        python -m srcdiag report a.less --index 17 --message "Unrecognised input"
"""

from __future__ import annotations

from srcdiag.cli.main import cli

if __name__ == "__main__":
    cli()
