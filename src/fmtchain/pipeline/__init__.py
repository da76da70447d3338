# topmark:header:start
#
#   project      : FmtChain
#   file         : __init__.py
#   file_relpath : src/fmtchain/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The chained formatting pipeline: gate, executor, handlers, and edit producer."""

from __future__ import annotations

from fmtchain.pipeline.edits import format_document, format_document_range
from fmtchain.pipeline.handler import Handle, build_pipeline, identity, make_stage_handler

__all__ = [
    "Handle",
    "build_pipeline",
    "format_document",
    "format_document_range",
    "identity",
    "make_stage_handler",
]
