# topmark:header:start
#
#   project      : FmtChain
#   file         : constants.py
#   file_relpath : src/fmtchain/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtChain Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FMTCHAIN_VERSION: str = get_version("fmtchain")
