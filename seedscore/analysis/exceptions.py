# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Errors raised while summarizing a result log.

Every one of these is terminal for the scan. There is no skip-and-continue:
a marker line we cannot read means the log is not what we think it is.
"""

from pathlib import Path


class SummaryError(Exception):
    """Base for all summary errors."""


class ReportFileError(SummaryError):
    """Raised when the result log is missing, is a directory, or cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read result log {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedLineError(SummaryError):
    """
    Raised when a line carries the size or score marker but its third
    whitespace-separated token is missing or not a number.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Malformed line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason
