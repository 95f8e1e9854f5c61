# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Summary report writer.

The report is what scripts downstream of the runner read off stdout:

    Seed 1002 is over        <- diagnostics, written during the scan
    Seed 1003 is zero
    inf                      <- the mean, Python's default float text
    Undersized runs: [1, 3]  <- only when asked for

Nothing is written to disk. The structured logger carries everything else.
"""

from typing import TextIO

from seedscore.analysis.aggregator import Emitter
from seedscore.analysis.models import SummaryResult
from seedscore.logging.logger import get_logger

logger = get_logger(__name__)


def stream_emitter(stream: TextIO) -> Emitter:
    """Build an emitter that writes each diagnostic as its own line and flushes."""

    def emit(message: str) -> None:
        stream.write(message + "\n")
        stream.flush()

    return emit


def format_report_text(result: SummaryResult, show_undersized: bool = False) -> str:
    lines: list[str] = [repr(result.mean)]
    if show_undersized:
        lines.append(f"Undersized runs: {list(result.undersized_runs)}")
    return "\n".join(lines) + "\n"


def write_report(
    result: SummaryResult,
    stream: TextIO,
    show_undersized: bool = False,
) -> None:
    """Write the closing part of the report (the mean, optionally the undersized runs)."""
    stream.write(format_report_text(result, show_undersized=show_undersized))
    stream.flush()

    logger.debug(
        "Summary report written",
        extra={"records": result.count, "show_undersized": show_undersized},
    )
