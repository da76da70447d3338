# topmark:header:start
#
#   project      : FmtChain
#   file         : edits.py
#   file_relpath : src/fmtchain/pipeline/edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn a pipeline run into editor text edits.

Both entry points return either a single-element edit list or ``None``.
``None`` means "leave the document untouched" (cancelled, or the pipeline
produced no text); it is never conflated with an empty replacement, which
would delete content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtchain.config.logging import get_logger
from fmtchain.document import Position, Range, TextEdit
from fmtchain.pipeline.handler import build_pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fmtchain.cancellation import CancellationToken
    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig
    from fmtchain.document import TextDocument
    from fmtchain.pipeline.handler import Handle

logger: FmtchainLogger = get_logger(__name__)


async def _run(
    configs: Sequence[FormatterConfig],
    document: TextDocument,
    source_text: str,
    token: CancellationToken,
) -> str | None:
    if token.is_cancellation_requested:
        return None
    pipeline: Handle = build_pipeline(configs, document, token)
    text: str | None = await pipeline(source_text)
    if token.is_cancellation_requested:
        logger.debug("Cancelled while formatting %s; result discarded", document.uri)
        return None
    if not text:
        logger.debug("No output for %s", document.uri)
        return None
    return text


async def format_document(
    configs: Sequence[FormatterConfig],
    document: TextDocument,
    token: CancellationToken,
) -> list[TextEdit] | None:
    """Format the whole document.

    Returns:
        list[TextEdit] | None: One edit spanning from the document start to one
            line past its last line, or ``None`` for "no edit".
    """
    text: str | None = await _run(configs, document, document.get_text(), token)
    if text is None:
        return None
    span = Range(Position(0, 0), Position(document.line_count + 1, 0))
    return [TextEdit(range=span, new_text=text)]


async def format_document_range(
    configs: Sequence[FormatterConfig],
    document: TextDocument,
    range: Range,
    token: CancellationToken,
) -> list[TextEdit] | None:
    """Format the text inside ``range``; the edit covers exactly ``range``."""
    text: str | None = await _run(configs, document, document.get_text(range), token)
    if text is None:
        return None
    return [TextEdit(range=range, new_text=text)]
