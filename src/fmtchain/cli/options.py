# topmark:header:start
#
#   project      : FmtChain
#   file         : options.py
#   file_relpath : src/fmtchain/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, config selection) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from fmtchain.cli.errors import FmtchainUsageError
from fmtchain.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        FmtchainUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level (stage errors are muted).
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FmtchainUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress log output.",
    )(f)
    return f


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config and --filetype options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path),
        default=None,
        help="Use this fmtchain.toml/pyproject.toml instead of discovering one.",
    )(f)
    f = click.option(
        "--filetype",
        "language_id",
        default=None,
        help="Language id to select formatters for (default: inferred from the file suffix).",
    )(f)
    return f
