# topmark:header:start
#
#   project      : FmtChain
#   file         : file.py
#   file_relpath : src/fmtchain/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-system helpers for locating a formatter's working directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fmtchain.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fmtchain.config.logging import FmtchainLogger

logger: FmtchainLogger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the path of ``file_path`` relative to ``root_path``.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path, or the absolute
            resolved ``file_path`` when it does not live under ``root_path``.
    """
    resolved_path: Path = file_path.resolve()
    resolved_root: Path = root_path.resolve()
    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        return resolved_path


def _dir_matches(directory: Path, patterns: Sequence[str]) -> bool:
    for pattern in patterns:
        if any(True for _ in directory.glob(pattern)):
            return True
    return False


def find_work_directory(file_path: Path, root_patterns: Sequence[str]) -> Path:
    """Return the nearest ancestor of ``file_path`` holding one of ``root_patterns``.

    Patterns are globs evaluated inside each candidate directory, starting with
    the file's own directory and walking up to the file-system root. Without
    patterns, or when nothing matches, the file's directory is returned.
    """
    start: Path = file_path.resolve().parent
    if not root_patterns:
        return start
    for directory in (start, *start.parents):
        if _dir_matches(directory, root_patterns):
            logger.trace("work directory for %s: %s", file_path, directory)
            return directory
    logger.debug("No root pattern %s found above %s", list(root_patterns), file_path)
    return start


def check_any_file_exists(directory: Path, filenames: Sequence[str]) -> bool:
    """Return True if any of ``filenames`` exists directly under ``directory``."""
    return any((directory / name).exists() for name in filenames)


def read_file_text(path: Path) -> str:
    """Read ``path`` as UTF-8, keeping its newlines untouched."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()
