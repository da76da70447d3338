# topmark:header:start
#
#   project      : FmtChain
#   file         : version.py
#   file_relpath : src/fmtchain/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtChain `version` command."""

from __future__ import annotations

import click

from fmtchain.constants import FMTCHAIN_VERSION


@click.command(
    name="version",
    help="Show the current version of FmtChain.",
)
def version_command() -> None:
    """Print the FmtChain version installed in the current Python environment."""
    click.echo(FMTCHAIN_VERSION)
