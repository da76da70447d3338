# topmark:header:start
#
#   project      : FmtChain
#   file         : cancellation.py
#   file_relpath : src/fmtchain/cancellation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cancellation tokens for formatting requests.

The pipeline receives a read-only `CancellationToken` and polls it at every
stage entry. Only the owner of the `CancellationTokenSource` (the editor
integration, or a test) may trip it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CancellationToken(Protocol):
    """Read-only view of a cancellation flag."""

    @property
    def is_cancellation_requested(self) -> bool:
        """Return True once cancellation has been requested."""
        ...


class _SourceToken:
    """Token bound to a `CancellationTokenSource`."""

    __slots__ = ("_source",)

    def __init__(self, source: CancellationTokenSource) -> None:
        self._source = source

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source.cancelled

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"


class CancellationTokenSource:
    """Owner of a cancellation flag.

    Example:
        ```python
        source = CancellationTokenSource()
        edits = await format_document(configs, document, source.token)
        source.cancel()  # later stages observe the request and stop
        ```
    """

    def __init__(self) -> None:
        self.cancelled: bool = False
        self.token: CancellationToken = _SourceToken(self)

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self.cancelled = True


class _NeverCancelled:
    __slots__ = ()

    @property
    def is_cancellation_requested(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "CancellationToken.None"


NONE_TOKEN: CancellationToken = _NeverCancelled()
