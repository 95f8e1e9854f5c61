# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for seedscore.

Every config section is a frozen pydantic model:
  - frozen=True: immutable after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

The sentinel values and the undersized threshold are deliberately absent.
They are part of the result-log format, not something an operator tunes.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GlobalConfig(BaseModel):
    """Cross-cutting settings: schema version and logging."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Logging verbosity; anything outside the standard level names is rejected",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )


class SummaryConfig(BaseModel):
    """
    Settings for the `summarize` command.

    report_path is resolved against the current working directory when it is
    relative, which is where the experiment runner drops result.txt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(description="Schema version")
    report_path: str = Field(
        default="result.txt",
        min_length=1,
        description="Result log to summarize, relative to the working directory",
    )
    show_undersized: bool = Field(
        default=False,
        description="Print the undersized-run list after the mean",
    )


class SeedScoreConfig(BaseModel):
    """
    Top-level config container.

    A YAML file may carry just `global:`; the summary section stays None and
    the command falls back to its defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    summary: Optional[SummaryConfig] = Field(default=None)
