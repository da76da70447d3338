# topmark:header:start
#
#   project      : FmtChain
#   file         : __main__.py
#   file_relpath : src/fmtchain/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FmtChain via ``python -m fmtchain``.

Delegates to `fmtchain.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Format a file and print the result::

        python -m fmtchain format src/app.py
"""

from __future__ import annotations

from fmtchain.cli.main import cli

if __name__ == "__main__":
    cli()
