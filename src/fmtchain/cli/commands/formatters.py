# topmark:header:start
#
#   project      : FmtChain
#   file         : formatters.py
#   file_relpath : src/fmtchain/cli/commands/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtChain `formatters` command.

Lists the configured formatter chain per filetype, in execution order. With a
PATH, only the chain that would run for that file is shown.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fmtchain.cli.commands.format import require_existing
from fmtchain.cli.config_resolver import ConfigResolver
from fmtchain.cli.options import config_options

if TYPE_CHECKING:
    from fmtchain.config.model import FmtchainConfig, FormatterConfig


def _describe(config: FormatterConfig) -> str:
    parts: list[str] = [config.command, *config.args]
    flags: list[str] = []
    if config.does_write_to_file:
        flags.append("writes file")
    if config.ignore:
        flags.append(f"ignore={list(config.ignore)}")
    if config.required_files:
        flags.append(f"requires={list(config.required_files)}")
    suffix: str = f"  ({'; '.join(flags)})" if flags else ""
    return " ".join(parts) + suffix


@click.command(
    name="formatters",
    help="List the configured formatter chains.",
)
@config_options
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
def formatters_command(
    *,
    path: Path | None,
    config_path: Path | None,
    language_id: str | None,
) -> None:
    """List formatter chains, one filetype per block."""
    if path is not None:
        require_existing(path)
    resolver = ConfigResolver(config_path=config_path, language_id=language_id)
    anchor: Path = path or Path.cwd() / "_"
    config: FmtchainConfig = resolver.config_for(anchor)

    if path is not None or language_id is not None:
        languages: list[str] = [resolver.language_for(anchor)]
    else:
        languages = sorted(config.filetypes)

    if not languages:
        click.echo("No formatters configured.")
        return

    for lang in languages:
        chain: list[FormatterConfig] = config.formatters_for(lang)
        click.echo(f"{lang}:")
        if not chain:
            click.echo("  (none)")
        for i, stage in enumerate(chain, start=1):
            click.echo(f"  {i}. {stage.label}: {_describe(stage)}")
