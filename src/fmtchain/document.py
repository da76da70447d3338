# topmark:header:start
#
#   project      : FmtChain
#   file         : document.py
#   file_relpath : src/fmtchain/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor protocol types used by the formatting pipeline.

These mirror the Language Server Protocol shapes the editor integration speaks
(``Position``, ``Range``, ``TextEdit``) plus a minimal in-memory
``TextDocument``. Lines and characters are 0-based. Offsets are computed on
Python ``str`` indices.

The types are immutable: a document snapshot never changes while a pipeline
runs over it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote, urlparse

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, order=True)
class Position:
    """A position in a text document (0-indexed line and character)."""

    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}

    @classmethod
    def from_dict(cls, d: dict[str, int]) -> Position:
        return cls(line=d["line"], character=d["character"])


@dataclass(frozen=True)
class Range:
    """A range in a text document (``end`` is exclusive)."""

    start: Position
    end: Position

    @classmethod
    def create(cls, start_line: int, start_char: int, end_line: int, end_char: int) -> Range:
        """Build a range from four coordinates."""
        return cls(Position(start_line, start_char), Position(end_line, end_char))

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Range:
        return cls(start=Position.from_dict(d["start"]), end=Position.from_dict(d["end"]))


@dataclass(frozen=True)
class TextEdit:
    """Replace the text in ``range`` with ``new_text``."""

    range: Range
    new_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TextEdit:
        return cls(range=Range.from_dict(d["range"]), new_text=d["newText"])


def _line_offsets(text: str) -> list[int]:
    """Return the start offset of every line; ``\\r\\n``, ``\\r`` and ``\\n`` break lines."""
    offsets: list[int] = [0]
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\r":
            if i + 1 < n and text[i + 1] == "\n":
                i += 1
            offsets.append(i + 1)
        elif ch == "\n":
            offsets.append(i + 1)
        i += 1
    return offsets


def uri_to_path(uri: str) -> Path:
    """Return the file-system path for a ``file://`` URI.

    Plain paths (no scheme) are returned unchanged.
    """
    parsed = urlparse(uri)
    if parsed.scheme in ("", "file"):
        return Path(unquote(parsed.path) if parsed.scheme else uri)
    raise ValueError(f"Unsupported URI scheme: {parsed.scheme!r} in {uri!r}")


@dataclass(frozen=True)
class TextDocument:
    """An immutable snapshot of a document's text.

    Attributes:
        uri (str): Document URI, usually ``file://...``.
        text (str): Full document content.
        language_id (str): Editor language identifier (e.g. ``python``).
        version (int): Editor document version; informational only.
    """

    uri: str
    text: str
    language_id: str = ""
    version: int = 0
    _offsets: list[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_offsets", _line_offsets(self.text))

    @classmethod
    def from_path(cls, path: Path, language_id: str = "") -> TextDocument:
        """Read ``path`` as UTF-8 and wrap it in a document.

        Newlines are kept as they are on disk.
        """
        resolved: Path = path.resolve()
        with resolved.open("r", encoding="utf-8", newline="") as fh:
            text: str = fh.read()
        return cls(uri=resolved.as_uri(), text=text, language_id=language_id)

    @property
    def path(self) -> Path:
        """File-system path of the document."""
        return uri_to_path(self.uri)

    @property
    def line_count(self) -> int:
        return len(self._offsets)

    def offset_at(self, position: Position) -> int:
        """Convert a position into a string offset, clamping out-of-range values."""
        if position.line >= len(self._offsets):
            return len(self.text)
        if position.line < 0:
            return 0
        line_offset: int = self._offsets[position.line]
        next_line_offset: int = (
            self._offsets[position.line + 1]
            if position.line + 1 < len(self._offsets)
            else len(self.text)
        )
        return max(min(line_offset + position.character, next_line_offset), line_offset)

    def get_text(self, range: Range | None = None) -> str:
        """Return the full text, or the text covered by ``range``."""
        if range is None:
            return self.text
        return self.text[self.offset_at(range.start) : self.offset_at(range.end)]


def apply_edits(document: TextDocument, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits to ``document`` and return the new text.

    Raises:
        ValueError: If two edits overlap.
    """
    ordered: list[TextEdit] = sorted(edits, key=lambda e: (e.range.start, e.range.end))
    text: str = document.text
    last_start: int | None = None
    # Back to front so earlier offsets stay valid.
    for edit in reversed(ordered):
        start: int = document.offset_at(edit.range.start)
        end: int = document.offset_at(edit.range.end)
        if last_start is not None and end > last_start:
            raise ValueError("Overlapping edits")
        text = text[:start] + edit.new_text + text[end:]
        last_start = start
    return text
