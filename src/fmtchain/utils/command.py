# topmark:header:start
#
#   project      : FmtChain
#   file         : command.py
#   file_relpath : src/fmtchain/utils/command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a formatter command name to an executable path.

Project-local installations win over global ones, so a repository pinned to
its own formatter version (``node_modules/.bin/prettier``, ``.venv/bin/black``)
is formatted with that version.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Final

from fmtchain.config.logging import get_logger
from fmtchain.errors import CommandNotFoundError

if TYPE_CHECKING:
    from fmtchain.config.logging import FmtchainLogger

logger: FmtchainLogger = get_logger(__name__)

LOCAL_BIN_DIRS: Final[tuple[str, ...]] = (
    "node_modules/.bin",
    ".venv/bin",
    "venv/bin",
)


def find_command(command: str, work_dir: Path) -> str:
    """Return the executable to spawn for ``command``.

    Resolution order:
      1. Commands containing a path separator resolve against ``work_dir``.
      2. Project-local bin directories of ``work_dir`` (see `LOCAL_BIN_DIRS`).
      3. ``PATH``.

    Args:
        command (str): Command name or path as configured.
        work_dir (Path): Working directory of the stage.

    Returns:
        str: Path of the executable.

    Raises:
        CommandNotFoundError: If no executable can be found.
    """
    if os.sep in command or (os.altsep and os.altsep in command):
        candidate: Path = Path(command)
        if not candidate.is_absolute():
            candidate = work_dir / candidate
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)
        raise CommandNotFoundError(command)

    for rel in LOCAL_BIN_DIRS:
        found: str | None = shutil.which(command, path=str(work_dir / rel))
        if found is not None:
            logger.debug("Using project-local %s: %s", command, found)
            return found

    found = shutil.which(command)
    if found is None:
        raise CommandNotFoundError(command)
    return found
