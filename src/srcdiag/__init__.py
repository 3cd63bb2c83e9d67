# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""SrcDiag package.

SrcDiag turns failures detected by a language front end (parser, compiler,
import manager) into structured diagnostics with a resolved source position and
a short source extract, and renders them as styled, human-readable reports.

Typical use:

```python
from srcdiag.diagnostic import build_diagnostic
from srcdiag.rendering import render_diagnostic
from srcdiag.sources import SourceSession

session = SourceSession({"a.less": "body {\n  color: red;\n}\n"})
diag = build_diagnostic({"filename": "a.less", "index": 17, "message": "boom"}, session)
print(render_diagnostic(diag))
```
"""

from __future__ import annotations
