# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the seedscore CLI.

Each function here corresponds to one CLI subcommand and returns an exit code.
Logs go through the structured logger on stderr; stdout carries only the
summary report.
"""

import argparse
import logging
import sys
from pathlib import Path

from seedscore.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from seedscore.config.exceptions import ConfigError
from seedscore.config.loader import load_config
from seedscore.config.schema import SeedScoreConfig, SummaryConfig
from seedscore.logging.logger import get_logger
from seedscore.runtime.bootstrap import bootstrap

DEFAULT_REPORT_NAME = "result.txt"


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, SeedScoreConfig | None, logging.Logger]:
    """
    The shared setup every command needs: load config, run bootstrap.

    Returns (exit_code, config, logger). If exit_code is not SUCCESS the
    caller should return it immediately.
    """
    logger = get_logger(f"seedscore.cli.{command_name}", log_level=args.log_level or "INFO")

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    bootstrap(
        config.global_config if config is not None else None,
        log_level=args.log_level,
    )

    if config is None:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _resolve_report_path(cli_path: str | None, summary_config: SummaryConfig | None) -> Path:
    """Pick the result log: --report, then config, then result.txt, relative to cwd."""
    if cli_path is not None:
        path = Path(cli_path)
    elif summary_config is not None:
        path = Path(summary_config.report_path)
    else:
        path = Path(DEFAULT_REPORT_NAME)

    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def handle_summarize(args: argparse.Namespace) -> int:
    """Print seed diagnostics and the mean score of a result log."""
    exit_code, config, logger = _load_and_bootstrap(args, "summarize")
    if exit_code != SUCCESS:
        return exit_code

    from seedscore.analysis.aggregator import summarize_report
    from seedscore.analysis.exceptions import MalformedLineError, ReportFileError
    from seedscore.analysis.reporting.writer import stream_emitter, write_report

    summary_config = config.summary if config is not None else None
    report_path = _resolve_report_path(args.report, summary_config)

    show_undersized = args.show_undersized
    if show_undersized is None:
        show_undersized = summary_config.show_undersized if summary_config is not None else False

    # Kept for compatibility with the runner's wrapper scripts, which always
    # pass a record count. The scan reads the whole log regardless.
    logger.debug("Record count argument ignored", extra={"num": args.num})

    logger.info(
        "Starting summary",
        extra={"command": "summarize", "report": str(report_path)},
    )

    try:
        result = summarize_report(report_path, emit=stream_emitter(sys.stdout))
    except ReportFileError as err:
        logger.error(
            "Result log unavailable",
            extra={"path": str(err.path), "error": err.reason},
        )
        return USER_ERROR
    except MalformedLineError as err:
        logger.error(
            "Malformed result log",
            extra={
                "path": str(report_path),
                "line_number": err.line_number,
                "line": err.line,
                "error": err.reason,
            },
        )
        return VALIDATION_ERROR
    except Exception as err:
        logger.error("Summary failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    write_report(result, sys.stdout, show_undersized=show_undersized)

    logger.info(
        "Summary finished",
        extra={"records": result.count, "mean": result.mean},
    )
    return SUCCESS


def handle_info(args: argparse.Namespace) -> int:
    """Log the version, the interpreter and the settings `summarize` would run with."""
    exit_code, config, logger = _load_and_bootstrap(args, "info")
    if exit_code != SUCCESS:
        return exit_code

    import platform

    from seedscore import __version__

    summary_config = config.summary if config is not None else None
    show_undersized = summary_config.show_undersized if summary_config is not None else False

    logger.info(
        "System information",
        extra={
            "seedscore_version": __version__,
            "python_version": platform.python_version(),
            "platform": platform.system(),
            "config": args.config,
            "report_path": str(_resolve_report_path(None, summary_config)),
            "show_undersized": show_undersized,
        },
    )
    return SUCCESS
