# topmark:header:start
#
#   project      : FmtChain
#   file         : cli_types.py
#   file_relpath : src/fmtchain/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the FmtChain CLI."""

from __future__ import annotations

import re
from typing import Any

import click

from fmtchain.cli.errors import FmtchainUsageError
from fmtchain.document import Range

_RANGE_RE = re.compile(r"^\s*(\d+):(\d+)\s*-\s*(\d+):(\d+)\s*$")


class RangeParam(click.ParamType):
    """Parse ``LINE:COL-LINE:COL`` (0-based, end exclusive) into a `Range`.

    Malformed ranges raise `FmtchainUsageError` rather than `click.BadParameter`:
    Click exits with 2 on bad parameters, which would read as "would change".
    """

    name = "range"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Range:
        if isinstance(value, Range):
            return value
        match = _RANGE_RE.match(str(value))
        if match is None:
            raise FmtchainUsageError(f"--range: {value!r} is not a LINE:COL-LINE:COL range")
        sl, sc, el, ec = (int(g) for g in match.groups())
        if (el, ec) < (sl, sc):
            raise FmtchainUsageError(f"--range: {value!r}: end precedes start")
        return Range.create(sl, sc, el, ec)
