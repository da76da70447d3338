# topmark:header:start
#
#   project      : FmtChain
#   file         : __init__.py
#   file_relpath : src/fmtchain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtChain package.

FmtChain runs a chain of external formatters over a document (or a range of
it), feeding each formatter the previous one's output, and returns a single
text edit with the final result. It backs an editor integration and ships a
small CLI.
"""

from __future__ import annotations
