# topmark:header:start
#
#   project      : FmtChain
#   file         : io.py
#   file_relpath : src/fmtchain/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load FmtChain configuration from TOML.

Sources (first found wins, searched from a start directory upwards):
  - ``fmtchain.toml`` (top-level tables), then
  - ``pyproject.toml`` with a ``[tool.fmtchain]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures before
being turned into the immutable model.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fmtchain.config.keys import Toml
from fmtchain.config.logging import get_logger
from fmtchain.config.model import FmtchainConfig
from fmtchain.errors import ConfigError

if TYPE_CHECKING:
    from fmtchain.config.logging import FmtchainLogger

logger: FmtchainLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _pyproject_table(data: TomlTable) -> TomlTable | None:
    node: Any = data
    for part in Toml.PYPROJECT_SECTION:
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def find_config_file(start: Path) -> Path | None:
    """Return the nearest config source at or above ``start``.

    A ``pyproject.toml`` only counts when it carries a ``[tool.fmtchain]`` table.
    """
    directory: Path = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for candidate_dir in (directory, *directory.parents):
        own: Path = candidate_dir / Toml.CONFIG_FILENAME
        if own.is_file():
            return own
        pyproject: Path = candidate_dir / Toml.PYPROJECT_FILENAME
        if pyproject.is_file():
            try:
                if _pyproject_table(load_toml_dict(pyproject)) is not None:
                    return pyproject
            except ConfigError:
                # Unrelated broken pyproject.toml; keep searching.
                continue
    return None


def load_config_file(path: Path) -> FmtchainConfig:
    """Load a configuration from ``path`` (``fmtchain.toml`` or ``pyproject.toml``).

    Raises:
        ConfigError: If the file is unreadable, malformed, or lacks the
            ``[tool.fmtchain]`` table (for ``pyproject.toml``).
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == Toml.PYPROJECT_FILENAME:
        table: TomlTable | None = _pyproject_table(data)
        if table is None:
            raise ConfigError(f"No [{'.'.join(Toml.PYPROJECT_SECTION)}] table in {path}")
        data = table
    config: FmtchainConfig = FmtchainConfig.from_mapping(data)
    logger.debug(
        "Loaded %d formatter(s) and %d filetype(s) from %s",
        len(config.formatters),
        len(config.filetypes),
        path,
    )
    return config


def load_config(*, path: Path | None = None, start: Path | None = None) -> FmtchainConfig:
    """Load the explicit ``path`` or discover a config source from ``start``.

    Returns an empty configuration when nothing is found.
    """
    if path is not None:
        return load_config_file(path)
    found: Path | None = find_config_file(start or Path.cwd())
    if found is None:
        logger.info("No FmtChain configuration found above %s", start or Path.cwd())
        return FmtchainConfig()
    return load_config_file(found)
