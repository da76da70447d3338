# topmark:header:start
#
#   project      : FmtChain
#   file         : handler.py
#   file_relpath : src/fmtchain/pipeline/handler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stage handlers and the pipeline builder.

A *handle* is an async function ``text -> text | None``. Every configured
stage becomes a handle that closes over its config, the document, the
cancellation token, and ``next_handle``: the handle for all later stages.
The last stage's ``next_handle`` is `identity`.

    handle(text):
        cancelled?            -> None (no later stage runs)
        gate says skip        -> next_handle(text)
        formatter ok          -> next_handle(output)
        formatter raised      -> next_handle(text)   # pre-stage input

The pipeline is built by iterating the configurations in reverse and wrapping
a running ``next_handle`` reference, so the first configuration ends up as the
outermost handle and runs first. Stages run strictly one after another.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from fmtchain.config.logging import get_logger
from fmtchain.pipeline.executor import run_formatter
from fmtchain.pipeline.gate import should_skip
from fmtchain.utils.file import compute_relpath, find_work_directory

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from fmtchain.cancellation import CancellationToken
    from fmtchain.config.logging import FmtchainLogger
    from fmtchain.config.model import FormatterConfig
    from fmtchain.document import TextDocument

logger: FmtchainLogger = get_logger(__name__)

Handle = Callable[[str], Awaitable["str | None"]]


async def identity(text: str) -> str | None:
    """Terminal handle: return the text unchanged."""
    return text


async def _run_stage(config: FormatterConfig, document: TextDocument, text: str) -> str:
    """Gate and run one stage; return the text for the next stage."""
    file_path: Path = document.path
    work_dir: Path = find_work_directory(file_path, config.root_patterns)
    rel_path: Path = compute_relpath(file_path, work_dir)

    if should_skip(config, work_dir, rel_path):
        logger.debug("%s: skipped for %s", config.label, rel_path)
        return text

    return await run_formatter(config, work_dir, text, document)


def make_stage_handler(
    config: FormatterConfig,
    document: TextDocument,
    next_handle: Handle,
    token: CancellationToken,
) -> Handle:
    """Wrap one stage into a handle delegating to ``next_handle``.

    Any exception raised by the stage itself is logged and the stage's own
    input is forwarded, so a failing stage never blocks the rest of the chain.
    ``next_handle`` is called outside that error boundary: later stages
    contain their own failures, and a continuation must not run twice.
    """

    async def handle(text: str) -> str | None:
        if token.is_cancellation_requested:
            logger.debug("%s: cancelled before start", config.label)
            return None
        try:
            output: str = await _run_stage(config, document, text)
        except Exception as e:
            logger.error("%s: format error: %s", config.label, e)
            output = text
        return await next_handle(output)

    return handle


def build_pipeline(
    configs: Sequence[FormatterConfig],
    document: TextDocument,
    token: CancellationToken,
) -> Handle:
    """Compose ``configs`` into one handle; the first config runs first.

    ``configs`` is not modified.
    """
    handle: Handle = identity
    for config in reversed(configs):
        handle = make_stage_handler(config, document, handle, token)
    return handle
