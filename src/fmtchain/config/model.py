# topmark:header:start
#
#   project      : FmtChain
#   file         : model.py
#   file_relpath : src/fmtchain/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration model for FmtChain.

`FormatterConfig` describes one pipeline stage: which executable to run and
how to interpret its result. `FmtchainConfig` holds the named formatters and
the per-filetype ordering of stages.

Both are frozen dataclasses with tuple/frozenset fields, so a configuration
cannot change while a pipeline is running over it and no stage can alter
another stage's settings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fmtchain.config.keys import KEY_ALIASES, Toml
from fmtchain.config.logging import get_logger
from fmtchain.errors import ConfigError

if TYPE_CHECKING:
    from fmtchain.config.logging import FmtchainLogger

logger: FmtchainLogger = get_logger(__name__)

_KNOWN_KEYS: frozenset[str] = frozenset(
    {
        Toml.KEY_COMMAND,
        Toml.KEY_ARGS,
        Toml.KEY_ROOT_PATTERNS,
        Toml.KEY_IS_STDOUT,
        Toml.KEY_IS_STDERR,
        Toml.KEY_IGNORE_EXIT_CODE,
        Toml.KEY_IGNORE,
        Toml.KEY_REQUIRED_FILES,
        Toml.KEY_DOES_WRITE_TO_FILE,
    }
)


def _str_tuple(value: Any, key: str, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigError(f"{where}: '{key}' must be a string or a list of strings")


def _opt_bool(value: Any, key: str, where: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"{where}: '{key}' must be a boolean")


def _exit_code_policy(value: Any, where: str) -> bool | frozenset[int]:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (list, tuple)) and all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        return frozenset(value)
    raise ConfigError(
        f"{where}: '{Toml.KEY_IGNORE_EXIT_CODE}' must be a boolean or a list of exit codes"
    )


@dataclass(frozen=True)
class FormatterConfig:
    """Declarative description of one formatting stage.

    Attributes:
        command (str): Executable name or path.
        args (tuple[str, ...]): Arguments; may contain document placeholders.
        root_patterns (tuple[str, ...]): Markers locating the working directory.
        is_stdout (bool | None): Feed stdout into the output. ``None`` = unspecified.
        is_stderr (bool | None): Feed stderr into the output. ``None`` = unspecified.
        ignore_exit_code (bool | frozenset[int]): ``True`` accepts any nonzero
            exit code; a set accepts only the listed codes.
        ignore (tuple[str, ...]): Gitignore-style patterns of files to leave alone.
        required_files (tuple[str, ...]): Run only if one of these exists in the
            working directory.
        does_write_to_file (bool): The formatter rewrites the file in place; the
            output is re-read from disk.
        name (str): Configuration name, used in log messages.
    """

    command: str
    args: tuple[str, ...] = ()
    root_patterns: tuple[str, ...] = ()
    is_stdout: bool | None = None
    is_stderr: bool | None = None
    ignore_exit_code: bool | frozenset[int] = False
    ignore: tuple[str, ...] = ()
    required_files: tuple[str, ...] = ()
    does_write_to_file: bool = False
    name: str = field(default="", compare=False)

    @property
    def label(self) -> str:
        return self.name or self.command

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, name: str = "") -> FormatterConfig:
        """Build a config from a TOML/JSON mapping.

        Both snake_case keys and the camelCase editor spellings are accepted.
        Unknown keys are logged and ignored.

        Raises:
            ConfigError: If ``command`` is missing or a value has the wrong type.
        """
        where: str = f"formatter '{name}'" if name else "formatter"
        values: dict[str, Any] = {}
        for raw_key, value in data.items():
            key: str = KEY_ALIASES.get(raw_key, raw_key)
            if key not in _KNOWN_KEYS:
                logger.warning("%s: unknown key '%s' ignored", where, raw_key)
                continue
            values[key] = value

        command: Any = values.get(Toml.KEY_COMMAND)
        if not isinstance(command, str) or not command:
            raise ConfigError(f"{where}: '{Toml.KEY_COMMAND}' is required")

        does_write: bool | None = _opt_bool(
            values.get(Toml.KEY_DOES_WRITE_TO_FILE), Toml.KEY_DOES_WRITE_TO_FILE, where
        )
        return cls(
            command=command,
            args=_str_tuple(values.get(Toml.KEY_ARGS), Toml.KEY_ARGS, where),
            root_patterns=_str_tuple(
                values.get(Toml.KEY_ROOT_PATTERNS), Toml.KEY_ROOT_PATTERNS, where
            ),
            is_stdout=_opt_bool(values.get(Toml.KEY_IS_STDOUT), Toml.KEY_IS_STDOUT, where),
            is_stderr=_opt_bool(values.get(Toml.KEY_IS_STDERR), Toml.KEY_IS_STDERR, where),
            ignore_exit_code=_exit_code_policy(values.get(Toml.KEY_IGNORE_EXIT_CODE), where),
            ignore=_str_tuple(values.get(Toml.KEY_IGNORE), Toml.KEY_IGNORE, where),
            required_files=_str_tuple(
                values.get(Toml.KEY_REQUIRED_FILES), Toml.KEY_REQUIRED_FILES, where
            ),
            does_write_to_file=bool(does_write),
            name=name,
        )


@dataclass(frozen=True)
class FmtchainConfig:
    """Named formatters plus the per-filetype stage order."""

    formatters: Mapping[str, FormatterConfig] = field(default_factory=dict)
    filetypes: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FmtchainConfig:
        """Build a configuration from the top-level table of a config source.

        Raises:
            ConfigError: On malformed sections or unknown formatter references.
        """
        raw_formatters: Any = data.get(Toml.SECTION_FORMATTERS, {})
        if not isinstance(raw_formatters, Mapping):
            raise ConfigError(f"[{Toml.SECTION_FORMATTERS}] must be a table")
        formatters: dict[str, FormatterConfig] = {}
        for name, table in raw_formatters.items():
            if not isinstance(table, Mapping):
                raise ConfigError(f"[{Toml.SECTION_FORMATTERS}.{name}] must be a table")
            formatters[name] = FormatterConfig.from_mapping(table, name=name)

        raw_filetypes: Any = data.get(Toml.SECTION_FILETYPES, {})
        if not isinstance(raw_filetypes, Mapping):
            raise ConfigError(f"[{Toml.SECTION_FILETYPES}] must be a table")
        filetypes: dict[str, tuple[str, ...]] = {}
        for language_id, names in raw_filetypes.items():
            ordered: tuple[str, ...] = _str_tuple(
                names, language_id, f"[{Toml.SECTION_FILETYPES}]"
            )
            unknown: list[str] = [n for n in ordered if n not in formatters]
            if unknown:
                raise ConfigError(
                    f"[{Toml.SECTION_FILETYPES}] {language_id}: "
                    f"unknown formatter(s): {', '.join(unknown)}"
                )
            filetypes[language_id] = ordered

        return cls(formatters=formatters, filetypes=filetypes)

    def formatters_for(self, language_id: str) -> list[FormatterConfig]:
        """Return the ordered stage configurations for ``language_id``.

        A filetype without an entry yields an empty list.
        """
        return [self.formatters[name] for name in self.filetypes.get(language_id, ())]
