# topmark:header:start
#
#   project      : FmtChain
#   file         : main.py
#   file_relpath : src/fmtchain/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the FmtChain CLI.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read them from there.
"""

from __future__ import annotations

import click

from fmtchain.cli.commands.format import format_command
from fmtchain.cli.commands.formatters import formatters_command
from fmtchain.cli.commands.version import version_command
from fmtchain.cli.options import common_verbose_options, resolve_verbosity
from fmtchain.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level) on the Click context.

    ``FMTCHAIN_LOG_LEVEL`` wins over ``-v``/``-q`` when set.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FmtChain: run a chain of external formatters over files.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the FmtChain CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'fmtchain format PATH...' to format files.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(format_command)

cli.add_command(formatters_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
