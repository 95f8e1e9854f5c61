# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for seedscore.

Every log entry is a single JSON line: timestamped, leveled, tagged with the
source module. Logs go to stderr, never stdout. Stdout belongs to the summary
itself (the seed diagnostics and the mean), and anything piping that output
into another tool must not see log noise mixed in.

How this works:
  - Python's standard `logging` module does the routing, with JsonFormatter
    serializing every record into one JSON line.
  - One handler for stderr is always attached, plus an optional file handler.
  - `get_logger` is the only way to create loggers in this package.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "seedscore.analysis.aggregator", "msg": "Report summarized", ...}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Mandatory fields:
      ts     — ISO 8601 UTC timestamp
      level  — log level name
      module — the logger name (usually the Python module path)
      msg    — the formatted message string

    Anything passed through the `extra` kwarg is merged into the object, which
    is how the aggregator attaches seed numbers, counts and paths.
    """

    _STANDARD_ATTRS = frozenset({
        "name",
        "msg",
        "args",
        "created",
        "relativeCreated",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "pathname",
        "filename",
        "module",
        "levelno",
        "levelname",
        "processName",
        "process",
        "threadName",
        "thread",
        "message",
        "msecs",
        "taskName",
    })

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create a structured JSON logger.

    Args:
        name: Logger name, typically __name__ of the calling module.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stderr and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    logger = logging.getLogger(name)
    level = _resolve_log_level(log_level)
    logger.setLevel(level)

    # get_logger runs at import time in most modules and again from the CLI
    # with the requested level; only the level changes on repeat calls.
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = JsonFormatter()

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(log_level: str, log_file: Optional[Path] = None) -> None:
    """
    Apply a level (and optional log file) to every seedscore logger created so far.

    Module-level loggers are built at import time with the default level, long
    before the CLI has parsed --log-level. Bootstrap calls this once so the
    whole package follows the requested verbosity.
    """
    level = _resolve_log_level(log_level)
    formatter = JsonFormatter()

    for name in list(logging.Logger.manager.loggerDict):
        if name != "seedscore" and not name.startswith("seedscore."):
            continue
        logger = logging.getLogger(name)
        if not logger.handlers:
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

        if log_file is None:
            continue
        already_attached = any(
            isinstance(handler, logging.FileHandler)
            and handler.baseFilename == os.path.abspath(log_file)
            for handler in logger.handlers
        )
        if not already_attached:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
