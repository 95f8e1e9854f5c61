# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for result-log summaries.

AggregationState is the only mutable thing in the package. It lives for one
scan and is thrown away afterwards. SummaryResult is what the scan hands back,
frozen so nothing downstream can quietly rewrite the numbers.
"""

from dataclasses import dataclass, field
from pathlib import Path


SIZE_MARKER: str = "N ="
SCORE_MARKER: str = "Score"

# Both values live in the third whitespace-separated token: "N = 10", "Score = 5.0".
FIELD_INDEX: int = 2

# A score of -1 means the run went over its limits; 0 is a real (bad) result.
OVER_SENTINEL: float = -1
ZERO_SENTINEL: float = 0

UNDERSIZED_THRESHOLD: int = 14

# The runner numbers seeds from 1001, so record ordinal 0 is seed 1001.
SEED_OFFSET: int = 1000


def seed_for_ordinal(ordinal: int) -> int:
    """Seed number for a 1-based record ordinal."""
    return ordinal + SEED_OFFSET


@dataclass
class AggregationState:
    """
    Running totals for one pass over a result log.

    count goes up by exactly one per score line, whatever the score was.
    running_sum is updated once per score line with the sentinel-adjusted value.
    """

    count: int = 0
    running_sum: float = 0.0
    undersized_runs: list[int] = field(default_factory=list)
    over_seeds: list[int] = field(default_factory=list)
    zero_seeds: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryResult:
    """The outcome of summarizing one result log."""

    mean: float
    count: int
    running_sum: float
    undersized_runs: tuple[int, ...] = ()
    over_seeds: tuple[int, ...] = ()
    zero_seeds: tuple[int, ...] = ()
    source: Path | None = None
