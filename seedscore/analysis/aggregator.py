# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Single-pass aggregation of a result log.

The runner writes one block per seed: maybe a "N = <size>" line, then exactly
one "Score = <value>" line. Every score line closes a record. We walk the
lines once, in order, and feed each marker line into one of two handlers:

  on_size_line  — flags the record as undersized when size <= 14
  on_score_line — applies the sentinel rules and adds the score to the total

Sentinel rules:
  -1 → "Seed N is over", counted as +inf, so one over-run makes the mean inf
   0 → "Seed N is zero", counted as a literal zero

Diagnostics go out through `emit` the moment they are found, not batched at
the end, so anyone tailing stdout sees them in log order.

The mean is a plain IEEE division. An empty log gives nan, not an error.
"""

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

import numpy as np

from seedscore.analysis.exceptions import ReportFileError
from seedscore.analysis.models import (
    OVER_SENTINEL,
    UNDERSIZED_THRESHOLD,
    ZERO_SENTINEL,
    AggregationState,
    SummaryResult,
    seed_for_ordinal,
)
from seedscore.analysis.parser import is_score_line, is_size_line, parse_score, parse_size
from seedscore.logging.logger import get_logger

logger = get_logger(__name__)

Emitter = Callable[[str], None]


def _discard(message: str) -> None:
    pass


def on_size_line(state: AggregationState, size: int) -> None:
    """
    Record an undersized run.

    The ordinal is count + 1 where count is the number of score lines seen
    *before* this size line, i.e. the record this size line opens.
    """
    if size <= UNDERSIZED_THRESHOLD:
        state.undersized_runs.append(state.count + 1)


def on_score_line(state: AggregationState, score: float, emit: Emitter = _discard) -> None:
    """Apply sentinel handling to one score and fold it into the running totals."""
    seed = seed_for_ordinal(state.count + 1)

    if score == OVER_SENTINEL:
        emit(f"Seed {seed} is over")
        state.over_seeds.append(seed)
        logger.debug("Seed went over", extra={"seed": seed})
        score = float("inf")
    elif score == ZERO_SENTINEL:
        emit(f"Seed {seed} is zero")
        state.zero_seeds.append(seed)
        logger.debug("Seed scored zero", extra={"seed": seed})

    state.running_sum += score
    state.count += 1


def compute_mean(running_sum: float, count: int) -> float:
    """
    Divide with IEEE 754 semantics.

    Python floats raise ZeroDivisionError on x / 0; numpy float64 follows
    IEEE instead, so an empty log yields nan (0/0).
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(running_sum) / np.float64(count))


def aggregate_lines(
    lines: Iterable[str],
    emit: Optional[Emitter] = None,
    source: Optional[Path] = None,
) -> SummaryResult:
    """
    Scan result-log lines and summarize them.

    A line carrying both markers is handled as a size line first, then as a
    score line.

    Args:
        lines: The log, line by line. An open text file works.
        emit: Called with each sentinel diagnostic as it is found.
        source: Where the lines came from, kept on the result for reporting.

    Returns:
        SummaryResult with the mean and the per-seed bookkeeping.

    Raises:
        MalformedLineError: A marker line without a numeric third field.
    """
    if emit is None:
        emit = _discard

    state = AggregationState()

    for line_number, line in enumerate(lines, start=1):
        if is_size_line(line):
            on_size_line(state, parse_size(line, line_number))
        if is_score_line(line):
            on_score_line(state, parse_score(line, line_number), emit)

    result = SummaryResult(
        mean=compute_mean(state.running_sum, state.count),
        count=state.count,
        running_sum=state.running_sum,
        undersized_runs=tuple(state.undersized_runs),
        over_seeds=tuple(state.over_seeds),
        zero_seeds=tuple(state.zero_seeds),
        source=source,
    )

    if result.count == 0:
        logger.warning(
            "No score lines found, mean is undefined",
            extra={"source": str(source) if source is not None else None},
        )

    logger.info(
        "Result log summarized",
        extra={
            "source": str(source) if source is not None else None,
            "records": result.count,
            "mean": result.mean,
            "over": len(result.over_seeds),
            "zero": len(result.zero_seeds),
            "undersized": len(result.undersized_runs),
        },
    )

    return result


def summarize_report(path: Path, emit: Optional[Emitter] = None) -> SummaryResult:
    """
    Open a result log and summarize it.

    The file is streamed line by line and always closed, including when a
    malformed line aborts the scan.

    Raises:
        ReportFileError: The file is missing, is a directory, or unreadable.
        MalformedLineError: A marker line without a numeric third field.
    """
    if not path.exists():
        raise ReportFileError(path, "file not found")

    if not path.is_file():
        raise ReportFileError(path, "not a regular file")

    logger.debug("Opening result log", extra={"path": str(path)})

    try:
        handle = path.open("r", encoding="utf-8")
    except OSError as err:
        raise ReportFileError(path, str(err)) from err

    with handle:
        try:
            return aggregate_lines(handle, emit=emit, source=path)
        except (OSError, UnicodeDecodeError) as err:
            raise ReportFileError(path, str(err)) from err
