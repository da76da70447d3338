# topmark:header:start
#
#   project      : FmtChain
#   file         : keys.py
#   file_relpath : src/fmtchain/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for FmtChain configuration.

Keys defined here are the *external configuration API* as it appears in
``fmtchain.toml`` and in ``[tool.fmtchain]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by FmtChain configuration."""

    # Discovery
    CONFIG_FILENAME: Final[str] = "fmtchain.toml"
    PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
    PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "fmtchain")

    # [formatters.<name>]
    SECTION_FORMATTERS: Final[str] = "formatters"

    KEY_COMMAND: Final[str] = "command"
    KEY_ARGS: Final[str] = "args"
    KEY_ROOT_PATTERNS: Final[str] = "root_patterns"
    KEY_IS_STDOUT: Final[str] = "is_stdout"
    KEY_IS_STDERR: Final[str] = "is_stderr"
    KEY_IGNORE_EXIT_CODE: Final[str] = "ignore_exit_code"
    KEY_IGNORE: Final[str] = "ignore"
    KEY_REQUIRED_FILES: Final[str] = "required_files"
    KEY_DOES_WRITE_TO_FILE: Final[str] = "does_write_to_file"

    # [filetypes]
    SECTION_FILETYPES: Final[str] = "filetypes"


# camelCase spellings used by editor-integration settings (JSON).
KEY_ALIASES: Final[dict[str, str]] = {
    "rootPatterns": Toml.KEY_ROOT_PATTERNS,
    "isStdout": Toml.KEY_IS_STDOUT,
    "isStderr": Toml.KEY_IS_STDERR,
    "ignoreExitCode": Toml.KEY_IGNORE_EXIT_CODE,
    "requiredFiles": Toml.KEY_REQUIRED_FILES,
    "doesWriteToFile": Toml.KEY_DOES_WRITE_TO_FILE,
}
