# topmark:header:start
#
#   project      : FmtChain
#   file         : errors.py
#   file_relpath : src/fmtchain/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FmtChain core.

None of these escape a formatting request: stage handlers log them and fall
back to the stage input. They exist so collaborators can signal *what* went
wrong, and so the CLI can map configuration problems to exit codes.
"""

from __future__ import annotations


class FmtchainError(Exception):
    """Base class for all FmtChain errors."""


class ConfigError(FmtchainError):
    """Configuration is missing, malformed, or refers to unknown formatters."""


class ExecutionError(FmtchainError):
    """An external formatter could not be resolved, spawned, or read back."""


class CommandNotFoundError(ExecutionError):
    """The formatter executable could not be located."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Command not found: {command}")
        self.command: str = command
