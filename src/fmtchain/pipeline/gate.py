# topmark:header:start
#
#   project      : FmtChain
#   file         : gate.py
#   file_relpath : src/fmtchain/pipeline/gate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether a stage's formatter runs for the current document.

Rules, first match skips the stage:
  1. The document lives under the working directory and its relative path
     matches one of the stage's ``ignore`` patterns (gitignore syntax).
  2. ``required_files`` is non-empty and none of them exists in the working
     directory.

A failure while matching ignore patterns (e.g. a malformed pattern) is logged
and counts as "no match": the stage still runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec

from fmtchain.config.logging import get_logger
from fmtchain.utils.file import check_any_file_exists

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig

logger: FmtchainLogger = get_logger(__name__)


def matches_ignore(patterns: Sequence[str], rel_path: Path) -> bool:
    """Return True if ``rel_path`` matches any gitignore-style pattern.

    Raises:
        ValueError: If a pattern cannot be compiled.
    """
    spec: GitIgnoreSpec = GitIgnoreSpec.from_lines(list(patterns))
    return spec.match_file(rel_path.as_posix())


def is_ignored(config: FormatterConfig, rel_path: Path) -> bool:
    """Apply rule 1; matching errors are logged and treated as "not ignored"."""
    if rel_path.is_absolute() or not config.ignore:
        return False
    try:
        return matches_ignore(config.ignore, rel_path)
    except Exception as e:
        logger.error("ignore error: %s", e)
        return False


def should_skip(config: FormatterConfig, work_dir: Path, rel_path: Path) -> bool:
    """Return True when the stage must pass its input through untouched.

    Args:
        config (FormatterConfig): The stage configuration.
        work_dir (Path): Resolved working directory of the stage.
        rel_path (Path): Document path relative to ``work_dir``; absolute when
            the document lives outside it.

    Returns:
        bool: True to skip the formatter, False to run it.
    """
    if is_ignored(config, rel_path):
        logger.debug("%s: %s is ignored", config.label, rel_path)
        return True
    if config.required_files and not check_any_file_exists(work_dir, config.required_files):
        logger.debug(
            "%s: none of %s found in %s", config.label, list(config.required_files), work_dir
        )
        return True
    return False
