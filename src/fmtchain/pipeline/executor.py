# topmark:header:start
#
#   project      : FmtChain
#   file         : executor.py
#   file_relpath : src/fmtchain/pipeline/executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run one stage's formatter and reduce its outcome to output text.

Output selection, in order of precedence:
  1. Nonzero exit code and no ``ignore_exit_code``: the stage input.
  2. Nonzero exit code not listed in an ``ignore_exit_code`` set: the stage input.
  3. ``does_write_to_file``: the file's content, re-read after the process exited.
  4. Neither ``is_stdout`` nor ``is_stderr`` given: stdout.
  5. Otherwise stdout (if ``is_stdout``) followed by stderr (if ``is_stderr``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtchain.config.logging import get_logger
from fmtchain.errors import ExecutionError
from fmtchain.process import execute_file
from fmtchain.utils.command import find_command
from fmtchain.utils.file import read_file_text

if TYPE_CHECKING:
    from pathlib import Path

    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig
    from fmtchain.document import TextDocument
    from fmtchain.process import ExecutionOutcome

logger: FmtchainLogger = get_logger(__name__)


def exit_code_accepted(config: FormatterConfig, code: int) -> bool:
    """Return True if ``code`` counts as success for this stage."""
    if code <= 0:
        return True
    if isinstance(config.ignore_exit_code, frozenset):
        return code in config.ignore_exit_code
    return bool(config.ignore_exit_code)


def select_output(
    config: FormatterConfig,
    outcome: ExecutionOutcome,
    input_text: str,
    written_text: str | None = None,
) -> str:
    """Pick the stage output from a process outcome.

    Args:
        config (FormatterConfig): The stage configuration.
        outcome (ExecutionOutcome): Exit code and captured streams.
        input_text (str): The stage input, returned when the exit code is rejected.
        written_text (str | None): File content re-read after the run; required
            when ``config.does_write_to_file`` is set.

    Returns:
        str: The text handed to the next stage.
    """
    if not exit_code_accepted(config, outcome.code):
        logger.debug("%s: exit code %d, keeping input", config.label, outcome.code)
        return input_text
    if config.does_write_to_file:
        if written_text is None:
            raise ExecutionError(f"{config.label}: no file content read back")
        return written_text
    if config.is_stdout is None and config.is_stderr is None:
        return outcome.stdout
    output: str = ""
    if config.is_stdout:
        output += outcome.stdout
    if config.is_stderr:
        output += outcome.stderr
    return output


async def run_formatter(
    config: FormatterConfig,
    work_dir: Path,
    input_text: str,
    document: TextDocument,
) -> str:
    """Run the stage's formatter over ``input_text`` and return its output.

    Raises:
        ExecutionError: If the command cannot be resolved or spawned, or the
            file cannot be read back.
    """
    command: str = find_command(config.command, work_dir)
    outcome: ExecutionOutcome = await execute_file(
        input_text,
        document,
        command,
        config.args,
        cwd=work_dir,
    )
    if outcome.stderr and outcome.code > 0:
        logger.debug("%s stderr: %s", config.label, outcome.stderr.rstrip())

    written_text: str | None = None
    if config.does_write_to_file and exit_code_accepted(config, outcome.code):
        try:
            written_text = read_file_text(document.path)
        except OSError as e:
            raise ExecutionError(f"Cannot read back {document.path}: {e}") from e
    return select_output(config, outcome, input_text, written_text)
