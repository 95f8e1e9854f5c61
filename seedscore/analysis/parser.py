# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Line classification and field extraction for result logs.

Matching is plain substring search, the same way the runner's output is
eyeballed by people: a line containing "N =" announces a board size, a line
containing "Score" announces a score. The value is always the third
whitespace-separated token. A line may contain both markers, in which case
it is both a size line and a score line.
"""

import math

from seedscore.analysis.exceptions import MalformedLineError
from seedscore.analysis.models import FIELD_INDEX, SCORE_MARKER, SIZE_MARKER


def is_size_line(line: str) -> bool:
    return SIZE_MARKER in line


def is_score_line(line: str) -> bool:
    return SCORE_MARKER in line


def _field_token(line: str, line_number: int) -> str:
    tokens = line.split()
    if len(tokens) <= FIELD_INDEX:
        raise MalformedLineError(
            line_number,
            line.rstrip("\n"),
            f"expected at least {FIELD_INDEX + 1} fields, got {len(tokens)}",
        )
    return tokens[FIELD_INDEX]


def parse_size(line: str, line_number: int = 0) -> int:
    """
    Extract the integer size from a size line.

    Raises:
        MalformedLineError: If the field is missing or not an integer.
    """
    token = _field_token(line, line_number)
    try:
        return int(token)
    except ValueError as err:
        raise MalformedLineError(
            line_number, line.rstrip("\n"), f"size {token!r} is not an integer"
        ) from err


def parse_score(line: str, line_number: int = 0) -> float:
    """
    Extract the float score from a score line.

    Raises:
        MalformedLineError: If the field is missing, not a number, or not finite.
    """
    token = _field_token(line, line_number)
    try:
        score = float(token)
    except ValueError as err:
        raise MalformedLineError(
            line_number, line.rstrip("\n"), f"score {token!r} is not a number"
        ) from err

    # float() accepts "nan" and "inf"; the runner never writes either.
    if not math.isfinite(score):
        raise MalformedLineError(
            line_number, line.rstrip("\n"), f"score {token!r} is not a finite number"
        )
    return score
