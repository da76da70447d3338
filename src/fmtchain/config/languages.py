# topmark:header:start
#
#   project      : FmtChain
#   file         : languages.py
#   file_relpath : src/fmtchain/config/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map file names to editor language identifiers.

Editors send the language id with every document; command-line callers only
have a path, so we infer the id from well-known suffixes and fall back to the
bare suffix (``foo.xyz`` → ``xyz``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path

LANGUAGE_IDS: Final[dict[str, str]] = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".json": "json",
    ".md": "markdown",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".sh": "sh",
    ".bash": "sh",
    ".go": "go",
    ".rs": "rust",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".lua": "lua",
    ".css": "css",
    ".scss": "scss",
    ".html": "html",
}


def language_id_for(path: Path) -> str:
    """Return the language id for ``path``."""
    suffix: str = path.suffix.lower()
    return LANGUAGE_IDS.get(suffix, suffix.lstrip("."))
