# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for seedscore tests.

Config files and result logs that more than one test module needs.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """The smallest config that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """Valid YAML that fails schema validation (missing config_version)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def mixed_result_lines() -> list[str]:
    """
    Three seeds: a normal score, an over-run and a zero.

    Sizes 10 and 5 are undersized, 20 is not.
    """
    return [
        "N = 10\n",
        "Score = 5.0\n",
        "N = 20\n",
        "Score = -1\n",
        "N = 5\n",
        "Score = 0\n",
    ]


@pytest.fixture()
def runner_log(tmp_path: Path) -> Path:
    """A result.txt the way the runner writes it, noise lines included."""
    content = textwrap.dedent("""\
        Money = 120
        Total base health = 300
        N = 20
        Score = 420
        Money = 80
        N = 12
        Score = 380
        WARNING: unknown argument -foo.
        N = 31
        Score = 500
    """)
    log_file = tmp_path / "result.txt"
    log_file.write_text(content, encoding="utf-8")
    return log_file
