# topmark:header:start
#
#   project      : FmtChain
#   file         : format.py
#   file_relpath : src/fmtchain/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtChain `format` command.

Runs the configured formatter chain over each PATH. Output modes:

- ``--stdout`` (default): print the formatted text.
- ``--check``: print nothing but the paths that would change; exit
  ``WOULD_CHANGE`` (2) if any.
- ``--apply``: write the formatted text back to each file.

When the pipeline produces no edit the file is left untouched and, in
``--stdout`` mode, printed as-is. Formatters configured with
``does_write_to_file`` rewrite the file themselves in every mode.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from fmtchain.cancellation import NONE_TOKEN
from fmtchain.cli.cli_types import RangeParam
from fmtchain.cli.config_resolver import ConfigResolver
from fmtchain.cli.errors import (
    FmtchainEncodingError,
    FmtchainFileNotFoundError,
    FmtchainIOError,
    FmtchainUsageError,
)
from fmtchain.cli.exit_codes import ExitCode
from fmtchain.cli.options import config_options
from fmtchain.config.logging import get_logger
from fmtchain.document import TextDocument, apply_edits
from fmtchain.pipeline.edits import format_document, format_document_range

if TYPE_CHECKING:
    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig
    from fmtchain.document import Range, TextEdit

logger: FmtchainLogger = get_logger(__name__)


def require_existing(path: Path) -> Path:
    """Return ``path``, or raise `FmtchainFileNotFoundError` if it does not exist."""
    if not path.exists():
        raise FmtchainFileNotFoundError(f"{path}: no such file")
    return path


def _read_document(path: Path, language_id: str) -> TextDocument:
    try:
        return TextDocument.from_path(path, language_id=language_id)
    except UnicodeDecodeError as e:
        raise FmtchainEncodingError(f"{path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FmtchainIOError(f"{path}: {e}") from e


def _write_text(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise FmtchainIOError(f"{path}: {e}") from e


def format_file(
    document: TextDocument,
    configs: list[FormatterConfig],
    range: Range | None = None,
) -> str:
    """Run the pipeline over ``document`` and return the resulting full text."""
    edits: list[TextEdit] | None
    if range is None:
        edits = asyncio.run(format_document(configs, document, NONE_TOKEN))
    else:
        edits = asyncio.run(format_document_range(configs, document, range, NONE_TOKEN))
    if edits is None:
        return document.text
    return apply_edits(document, edits)


@click.command(
    name="format",
    help="Run the configured formatter chain over files.",
)
@config_options
@click.option(
    "--range",
    "text_range",
    type=RangeParam(),
    default=None,
    help="Only format LINE:COL-LINE:COL (0-based, end exclusive). Requires a single PATH.",
)
@click.option("--stdout", "mode", flag_value="stdout", default=True, help="Print the result.")
@click.option("--check", "mode", flag_value="check", help="Report files that would change.")
@click.option("--apply", "mode", flag_value="apply", help="Write the result back to the files.")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    config_path: Path | None,
    language_id: str | None,
    text_range: Range | None,
    mode: str,
) -> None:
    """Format each PATH with the chain configured for its filetype."""
    if text_range is not None and len(paths) != 1:
        raise FmtchainUsageError("'--range' requires exactly one PATH.")

    for path in paths:
        require_existing(path)

    resolver = ConfigResolver(config_path=config_path, language_id=language_id)
    would_change: list[Path] = []

    for path in paths:
        configs: list[FormatterConfig] = resolver.formatters_for(path)
        document: TextDocument = _read_document(path, resolver.language_for(path))
        if not configs:
            logger.warning("No formatters configured for %s (%s)", path, document.language_id)
            new_text: str = document.text
        else:
            new_text = format_file(document, configs, text_range)

        changed: bool = new_text != document.text
        if mode == "stdout":
            click.echo(new_text, nl=False)
        elif mode == "check":
            if changed:
                would_change.append(path)
                click.echo(f"would reformat {path}")
        elif changed:
            _write_text(path, new_text)
            click.echo(f"reformatted {path}")

    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
