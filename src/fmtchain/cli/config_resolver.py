# topmark:header:start
#
#   project      : FmtChain
#   file         : config_resolver.py
#   file_relpath : src/fmtchain/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the configuration and stage list for files named on the command line.

An explicit ``--config`` applies to every file. Otherwise each file discovers
its nearest config source; sources are loaded once and cached per run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtchain.cli.errors import FmtchainConfigError
from fmtchain.config.io import find_config_file, load_config_file
from fmtchain.config.languages import language_id_for
from fmtchain.config.logging import get_logger
from fmtchain.config.model import FmtchainConfig
from fmtchain.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig

logger: FmtchainLogger = get_logger(__name__)


class ConfigResolver:
    """Load configurations on demand and map files to their formatter lists."""

    def __init__(self, config_path: Path | None = None, language_id: str | None = None) -> None:
        self.config_path: Path | None = config_path
        self.language_id: str | None = language_id
        self._cache: dict[Path | None, FmtchainConfig] = {}

    def config_for(self, file_path: Path) -> FmtchainConfig:
        """Return the configuration that applies to ``file_path``.

        Raises:
            FmtchainConfigError: If the configuration cannot be loaded.
        """
        source: Path | None = self.config_path or find_config_file(file_path.parent)
        if source not in self._cache:
            try:
                self._cache[source] = (
                    load_config_file(source) if source is not None else FmtchainConfig()
                )
            except ConfigError as e:
                raise FmtchainConfigError(str(e)) from e
        return self._cache[source]

    def language_for(self, file_path: Path) -> str:
        return self.language_id or language_id_for(file_path)

    def formatters_for(self, file_path: Path) -> list[FormatterConfig]:
        """Return the ordered stage configurations for ``file_path``."""
        language_id: str = self.language_for(file_path)
        configs: list[FormatterConfig] = self.config_for(file_path).formatters_for(language_id)
        logger.debug(
            "%s (%s): %s", file_path, language_id, [c.label for c in configs] or "no formatters"
        )
        return configs
