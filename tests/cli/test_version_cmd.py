# topmark:header:start
#
#   project      : FmtChain
#   file         : test_version_cmd.py
#   file_relpath : tests/cli/test_version_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the top-level group and `fmtchain version`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtchain.cli.exit_codes import ExitCode
from fmtchain.constants import FMTCHAIN_VERSION
from tests.cli.conftest import run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version_outputs_package_version() -> None:
    result: Result = run_cli(["version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == FMTCHAIN_VERSION


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])

    assert result.exit_code == ExitCode.SUCCESS
    assert "Hint:" in result.output
    assert "format" in result.output


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR
