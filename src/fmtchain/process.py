# topmark:header:start
#
#   project      : FmtChain
#   file         : process.py
#   file_relpath : src/fmtchain/process.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run one external formatter process.

`execute_file` spawns the formatter with `asyncio.create_subprocess_exec`,
streams the stage input on stdin, and waits until the process has exited and
both output streams are drained. The result is an `ExecutionOutcome`, owned by
the calling stage and discarded once reduced to output text.

Arguments may contain placeholders that are expanded per invocation:

    %file, %filepath   absolute path of the document
    %filename          basename of the document
    %fileext           suffix of the document (e.g. ``.py``)
    %dirname           directory of the document
    %text              the stage input text
    %tempfile          path of a temporary file holding the stage input
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from fmtchain.config.logging import get_logger
from fmtchain.errors import ExecutionError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.document import TextDocument

logger: FmtchainLogger = get_logger(__name__)

TEMPFILE_PLACEHOLDER: Final[str] = "%tempfile"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Exit code and captured output of one formatter invocation."""

    code: int
    stdout: str = ""
    stderr: str = ""


def expand_args(
    args: Sequence[str],
    document: TextDocument,
    input_text: str,
    tempfile_path: Path | None = None,
) -> list[str]:
    """Return ``args`` with document placeholders substituted.

    Longer placeholders are replaced first so ``%filepath`` is not read as
    ``%file`` followed by ``path``.
    """
    path: Path = document.path
    replacements: list[tuple[str, str]] = [
        ("%filepath", str(path)),
        ("%filename", path.name),
        ("%fileext", path.suffix),
        ("%dirname", str(path.parent)),
        ("%file", str(path)),
        ("%text", input_text),
    ]
    if tempfile_path is not None:
        replacements.insert(0, (TEMPFILE_PLACEHOLDER, str(tempfile_path)))

    out: list[str] = []
    for arg in args:
        for placeholder, value in replacements:
            if placeholder in arg:
                arg = arg.replace(placeholder, value)
        out.append(arg)
    return out


@contextmanager
def _input_tempfile(document: TextDocument, input_text: str) -> Iterator[Path]:
    """Write ``input_text`` to a temporary file carrying the document's suffix."""
    fd, name = tempfile.mkstemp(prefix="fmtchain-", suffix=document.path.suffix)
    tmp = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(input_text)
        yield tmp
    finally:
        tmp.unlink(missing_ok=True)


async def _spawn(
    command: str,
    args: Sequence[str],
    input_text: str,
    cwd: Path,
    env: Mapping[str, str] | None,
) -> ExecutionOutcome:
    logger.debug("exec: %s %s (cwd=%s)", command, " ".join(args), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            command,
            *args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd),
            env={**os.environ, **env} if env else None,
        )
    except OSError as e:
        raise ExecutionError(f"Cannot spawn {command}: {e}") from e

    try:
        stdout_b, stderr_b = await process.communicate(input_text.encode("utf-8"))
    except BaseException:
        # The awaiting task was cancelled or failed: the child must not outlive it.
        if process.returncode is None:
            logger.debug("killing %s (pid %d)", command, process.pid)
            process.kill()
            await process.wait()
        raise
    code: int = process.returncode if process.returncode is not None else 0
    outcome = ExecutionOutcome(
        code=code,
        stdout=stdout_b.decode("utf-8", errors="replace"),
        stderr=stderr_b.decode("utf-8", errors="replace"),
    )
    logger.trace("exit %d: %s", outcome.code, command)
    return outcome


async def execute_file(
    input_text: str,
    document: TextDocument,
    command: str,
    args: Sequence[str],
    *,
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> ExecutionOutcome:
    """Spawn ``command`` in ``cwd`` and feed it ``input_text`` on stdin.

    Args:
        input_text (str): Stage input, written to the process' stdin.
        document (TextDocument): Document being formatted (used for placeholders).
        command (str): Resolved executable path.
        args (Sequence[str]): Raw arguments, placeholders not yet expanded.
        cwd (Path): Working directory of the process.
        env (Mapping[str, str] | None): Extra environment variables.

    Returns:
        ExecutionOutcome: Exit code and decoded stdout/stderr.

    Raises:
        ExecutionError: If the process cannot be spawned.
    """
    if any(TEMPFILE_PLACEHOLDER in arg for arg in args):
        with _input_tempfile(document, input_text) as tmp:
            expanded: list[str] = expand_args(args, document, input_text, tmp)
            return await _spawn(command, expanded, input_text, cwd, env)
    return await _spawn(command, expand_args(args, document, input_text), input_text, cwd, env)
