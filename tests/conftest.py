# topmark:header:start
#
#   project      : FmtChain
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FmtChain test suite.

This file sets up global fixtures, typed wrappers around pytest decorators,
and helpers that build throw-away formatter scripts. Test formatters are small
Python programs run with the current interpreter (``sys.executable``), so the
suite needs no external formatter installed.
"""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from fmtchain.config import logging
from fmtchain.config.model import FormatterConfig
from fmtchain.document import TextDocument

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_asyncio: DecoratorType[Any] = as_typed_mark(pytest.mark.asyncio)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_fmtchain_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failures come with full pipeline logs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_script(directory: Path, name: str, body: str) -> Path:
    """Write a Python script under ``directory`` and return its path.

    Args:
        directory (Path): Target directory.
        name (str): Script file name.
        body (str): Script source; dedented before writing.

    Returns:
        Path: The script path.
    """
    script: Path = directory / name
    script.write_text(textwrap.dedent(body), encoding="utf-8")
    return script


def script_formatter(script: Path, *args: str, **overrides: Any) -> FormatterConfig:
    """Return a config running ``script`` with the current interpreter."""
    return FormatterConfig(command=sys.executable, args=(str(script), *args), **overrides)


def make_document(path: Path, text: str, language_id: str = "python") -> TextDocument:
    """Write ``text`` to ``path`` and return a document snapshot of it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return TextDocument(uri=path.resolve().as_uri(), text=text, language_id=language_id)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a project root holding a ``pyproject.toml`` marker and a ``src/`` dir."""
    root: Path = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "pyproject.toml").write_text("[project]\nname = 'demo'\n", encoding="utf-8")
    return root


@pytest.fixture
def scripts(tmp_path: Path) -> dict[str, Path]:
    """Return a set of reusable formatter scripts.

    - ``upper``: stdout = stdin upper-cased.
    - ``emit``: ``emit CODE STDOUT STDERR``; writes the given strings, exits CODE.
    - ``echo_stdin``: stdout = stdin, stderr = ``err:`` + stdin.
    - ``write_file``: ``write_file PATH TEXT``; overwrites PATH with TEXT.
    - ``append``: stdout = stdin + argv[1].
    - ``record``: appends stdin to the log file argv[1], echoes stdin.
    """
    bin_dir: Path = tmp_path / "bin"
    bin_dir.mkdir()
    return {
        "upper": write_script(
            bin_dir,
            "upper.py",
            """
            import sys
            sys.stdout.write(sys.stdin.read().upper())
            """,
        ),
        "emit": write_script(
            bin_dir,
            "emit.py",
            """
            import sys
            sys.stdin.read()
            sys.stdout.write(sys.argv[2])
            sys.stderr.write(sys.argv[3])
            sys.exit(int(sys.argv[1]))
            """,
        ),
        "echo_stdin": write_script(
            bin_dir,
            "echo_stdin.py",
            """
            import sys
            data = sys.stdin.read()
            sys.stdout.write(data)
            sys.stderr.write("err:" + data)
            """,
        ),
        "write_file": write_script(
            bin_dir,
            "write_file.py",
            """
            import sys
            sys.stdin.read()
            with open(sys.argv[1], "w", encoding="utf-8", newline="") as fh:
                fh.write(sys.argv[2])
            """,
        ),
        "append": write_script(
            bin_dir,
            "append.py",
            """
            import sys
            sys.stdout.write(sys.stdin.read() + sys.argv[1])
            """,
        ),
        "record": write_script(
            bin_dir,
            "record.py",
            """
            import sys
            data = sys.stdin.read()
            with open(sys.argv[1], "a", encoding="utf-8") as fh:
                fh.write(data + "|")
            sys.stdout.write(data)
            """,
        ),
    }
