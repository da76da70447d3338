# topmark:header:start
#
#   project      : FmtChain
#   file         : test_format.py
#   file_relpath : tests/cli/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `fmtchain format`: output modes, ranges, and exit codes."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from click.testing import Result

from fmtchain.cli.exit_codes import ExitCode
from tests.cli.conftest import run_cli_in, write_config
from tests.conftest import mark_cli, mark_integration


@pytest.fixture
def upper_project(tmp_path: Path, scripts: dict[str, Path]) -> Path:
    """A project whose Python chain upper-cases the text, then appends ``!``."""
    write_config(
        tmp_path,
        f"""
[formatters.upper]
command = '{sys.executable}'
args = ['{scripts["upper"]}']

[formatters.bang]
command = '{sys.executable}'
args = ['{scripts["append"]}', '!']

[filetypes]
python = ["upper", "bang"]
""",
    )
    (tmp_path / "a.py").write_text("hello\n", encoding="utf-8")
    return tmp_path


@mark_cli
@mark_integration
def test_format_stdout_prints_result(upper_project: Path) -> None:
    """Default mode prints the chained output and leaves the file alone."""
    result: Result = run_cli_in(upper_project, ["format", "a.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == "HELLO\n!"
    assert (upper_project / "a.py").read_text(encoding="utf-8") == "hello\n"


@mark_cli
@mark_integration
def test_format_check_reports_and_exits_would_change(upper_project: Path) -> None:
    result: Result = run_cli_in(upper_project, ["format", "--check", "a.py"])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "would reformat a.py" in result.output
    assert (upper_project / "a.py").read_text(encoding="utf-8") == "hello\n"


@mark_cli
@mark_integration
def test_format_apply_writes_file(upper_project: Path) -> None:
    result: Result = run_cli_in(upper_project, ["format", "--apply", "a.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "reformatted a.py" in result.output
    assert (upper_project / "a.py").read_text(encoding="utf-8") == "HELLO\n!"


@mark_cli
@mark_integration
def test_format_check_clean_file_succeeds(tmp_path: Path, scripts: dict[str, Path]) -> None:
    """A chain that changes nothing reports nothing."""
    write_config(
        tmp_path,
        f"""
[formatters.same]
command = '{sys.executable}'
args = ['{scripts["append"]}', '']

[filetypes]
python = ["same"]
""",
    )
    (tmp_path / "ok.py").write_text("x = 1\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["format", "--check", "ok.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "would reformat" not in result.output


@mark_cli
@mark_integration
def test_format_range_only_touches_range(tmp_path: Path, scripts: dict[str, Path]) -> None:
    """With --range the chain sees only the selected text."""
    write_config(
        tmp_path,
        f"""
[formatters.upper]
command = '{sys.executable}'
args = ['{scripts["upper"]}']

[filetypes]
python = ["upper"]
""",
    )
    (tmp_path / "r.py").write_text("one\ntwo\nthree\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["format", "--range", "1:0-2:0", "r.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == "one\nTWO\nthree\n"


@mark_cli
def test_format_range_requires_single_path(upper_project: Path) -> None:
    (upper_project / "b.py").write_text("x\n", encoding="utf-8")

    result: Result = run_cli_in(upper_project, ["format", "--range", "0:0-1:0", "a.py", "b.py"])

    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_format_bad_range_is_usage_error(upper_project: Path) -> None:
    result: Result = run_cli_in(upper_project, ["format", "--range", "2:0-1:0", "a.py"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "--range" in result.output


@mark_cli
def test_format_without_formatters_keeps_text(tmp_path: Path) -> None:
    """A filetype with no chain is printed unchanged."""
    (tmp_path / "notes.txt").write_text("as is\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["format", "notes.txt"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "as is\n" in result.output


@mark_cli
def test_format_invalid_config_exits_config_error(tmp_path: Path) -> None:
    write_config(tmp_path, '[filetypes]\npython = ["missing"]\n')
    (tmp_path / "a.py").write_text("x\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["format", "a.py"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "unknown formatter" in result.output


@mark_cli
@mark_integration
def test_format_failing_stage_is_skipped(tmp_path: Path, scripts: dict[str, Path]) -> None:
    """A missing command does not stop the rest of the chain."""
    write_config(
        tmp_path,
        f"""
[formatters.ghost]
command = "fmtchain-no-such-formatter"

[formatters.upper]
command = '{sys.executable}'
args = ['{scripts["upper"]}']

[filetypes]
python = ["ghost", "upper"]
""",
    )
    (tmp_path / "a.py").write_text("abc", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["-q", "format", "a.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == "ABC"


@mark_cli
def test_format_explicit_config_and_filetype(tmp_path: Path, scripts: dict[str, Path]) -> None:
    """--config and --filetype override discovery and suffix inference."""
    cfg_dir: Path = tmp_path / "cfg"
    cfg_dir.mkdir()
    cfg: Path = write_config(
        cfg_dir,
        f"""
[formatters.upper]
command = '{sys.executable}'
args = ['{scripts["upper"]}']

[filetypes]
markdown = ["upper"]
""",
    )
    (tmp_path / "README").write_text("docs", encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path, ["format", "--config", str(cfg), "--filetype", "markdown", "README"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == "DOCS"


@mark_cli
def test_format_missing_path_exits_file_not_found(upper_project: Path) -> None:
    """A nonexistent PATH maps to EX_NOINPUT, not Click's usage exit 2."""
    result: Result = run_cli_in(upper_project, ["format", "a.py", "gone.py"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "gone.py: no such file" in result.output


@mark_cli
def test_format_missing_config_exits_config_error(upper_project: Path) -> None:
    result: Result = run_cli_in(upper_project, ["format", "--config", "nope.toml", "a.py"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Cannot read" in result.output
