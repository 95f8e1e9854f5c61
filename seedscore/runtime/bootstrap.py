# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for seedscore.

Runs once, after the config is loaded and before a command reads any log.
It settles the effective log level (command line over config over INFO) and
the optional log file, then applies both to every package logger.
"""

from pathlib import Path
from typing import Optional

from seedscore.config.schema import GlobalConfig
from seedscore.logging.logger import configure_logging, get_logger


def bootstrap(config: Optional[GlobalConfig], log_level: Optional[str] = None) -> None:
    """
    Put the package loggers into the requested state.

    Args:
        config: The validated global configuration, or None when running on defaults.
        log_level: Level given on the command line. Wins over the config value.
    """
    level = log_level or (config.log_level if config is not None else "INFO")
    log_file = None
    if config is not None and config.log_file is not None:
        log_file = Path(config.log_file)

    logger = get_logger("seedscore.runtime", log_level=level, log_file=log_file)
    configure_logging(level, log_file)

    logger.debug(
        "Logging configured",
        extra={
            "log_level": level,
            "log_file": str(log_file) if log_file is not None else None,
            "config_loaded": config is not None,
        },
    )
