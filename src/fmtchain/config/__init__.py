# topmark:header:start
#
#   project      : FmtChain
#   file         : __init__.py
#   file_relpath : src/fmtchain/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for FmtChain: model, TOML loading, and logging setup."""

from __future__ import annotations

from fmtchain.config.io import find_config_file, load_config, load_config_file
from fmtchain.config.languages import language_id_for
from fmtchain.config.model import FmtchainConfig, FormatterConfig

__all__ = [
    "FmtchainConfig",
    "FormatterConfig",
    "find_config_file",
    "language_id_for",
    "load_config",
    "load_config_file",
]
