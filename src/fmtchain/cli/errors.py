# topmark:header:start
#
#   project      : FmtChain
#   file         : errors.py
#   file_relpath : src/fmtchain/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FmtChain CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Click prints the message and exits with ``exit_code``.
"""

from __future__ import annotations

import click

from fmtchain.cli.exit_codes import ExitCode


class FmtchainCliError(click.ClickException):
    """Base class for all FmtChain CLI errors."""

    exit_code = ExitCode.FAILURE


class FmtchainUsageError(FmtchainCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FmtchainConfigError(FmtchainCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class FmtchainEncodingError(FmtchainCliError):
    """Error when an input file is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class FmtchainIOError(FmtchainCliError):
    """Error when reading or writing a file fails."""

    exit_code = ExitCode.IO_ERROR


class FmtchainFileNotFoundError(FmtchainCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
