# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI smoke tests.

These run the real entrypoint in a subprocess, the way the runner's wrapper
scripts call it. That catches broken imports and argument wiring that unit
tests miss.
"""

import json
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _run_cli(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run `seedscore` with the given arguments and capture output."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(PROJECT_ROOT), env.get("PYTHONPATH")) if part
    )
    return subprocess.run(
        [sys.executable, "-m", "seedscore.cli.main", *args],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=cwd,
        env=env,
    )


def _write_log(directory: Path, content: str, name: str = "result.txt") -> Path:
    log_file = directory / name
    log_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return log_file


class TestHelpTexts:
    @pytest.mark.parametrize("subcommand", ["summarize", "info"])
    def test_subcommand_help_exits_zero(self, subcommand: str) -> None:
        result = _run_cli(subcommand, "--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_root_help_exits_with_user_error(self) -> None:
        result = _run_cli()
        assert result.returncode == 1


class TestSummarize:
    def test_reads_result_txt_from_working_directory(self, tmp_path: Path) -> None:
        _write_log(tmp_path, """\
            N = 10
            Score = 5.0
            N = 20
            Score = -1
            N = 5
            Score = 0
        """)
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "Seed 1002 is over",
            "Seed 1003 is zero",
            "inf",
        ]

    def test_plain_mean(self, tmp_path: Path) -> None:
        _write_log(tmp_path, """\
            Score = 1
            Score = 2
        """)
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout == "1.5\n"

    def test_empty_log_prints_nan(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Money = 10\n")
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout == "nan\n"

    def test_numeric_argument_is_accepted_and_ignored(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 4\nScore = 6\n")
        with_arg = _run_cli("summarize", "1", cwd=tmp_path)
        without_arg = _run_cli("summarize", cwd=tmp_path)

        assert with_arg.returncode == 0
        assert with_arg.stdout == without_arg.stdout == "5.0\n"

    def test_non_numeric_argument_is_accepted(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 4\nScore = 6\n")
        result = _run_cli("summarize", "abc", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout == "5.0\n"

    def test_report_option_and_undersized_list(self, tmp_path: Path) -> None:
        log_file = _write_log(tmp_path, "N = 10\nScore = 3\nN = 30\nScore = 5\n", name="run.log")
        result = _run_cli("summarize", "--report", str(log_file), "--show-undersized")

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["4.0", "Undersized runs: [1]"]

    def test_report_path_from_config(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 8\n", name="other.txt")
        config_file = tmp_path / "summary.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                summary:
                  config_version: "1.0.0"
                  report_path: "other.txt"
                  show_undersized: true
            """),
            encoding="utf-8",
        )
        result = _run_cli("summarize", "--config", str(config_file), cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["8.0", "Undersized runs: []"]

    def test_logs_stay_off_stdout(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 0\n")
        result = _run_cli("summarize", "--log-level", "DEBUG", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["Seed 1001 is zero", "0.0"]
        for line in result.stderr.splitlines():
            json.loads(line)


class TestSummarizeFailures:
    def test_missing_log_is_user_error(self, tmp_path: Path) -> None:
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 1  # USER_ERROR
        assert "result.txt" in result.stderr

    def test_malformed_line_is_validation_error(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = -1\nScore = soon\n")
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 4  # VALIDATION_ERROR
        assert result.stdout == "Seed 1001 is over\n"

    def test_non_finite_score_is_validation_error(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 3\nScore = nan\n")
        result = _run_cli("summarize", cwd=tmp_path)

        assert result.returncode == 4  # VALIDATION_ERROR
        assert result.stdout == ""

    def test_unknown_log_level_in_config_returns_config_error(self, tmp_path: Path) -> None:
        _write_log(tmp_path, "Score = 1\n")
        config_file = tmp_path / "loud.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                  log_level: "LOUD"
            """),
            encoding="utf-8",
        )
        result = _run_cli("summarize", "--config", str(config_file), cwd=tmp_path)

        assert result.returncode == 2  # CONFIG_ERROR
        assert result.stdout == ""
        assert "Traceback" not in result.stderr

    def test_nonexistent_config_returns_config_error(self, tmp_path: Path) -> None:
        result = _run_cli("summarize", "--config", "/nonexistent/path.yaml", cwd=tmp_path)
        assert result.returncode == 2  # CONFIG_ERROR

    def test_invalid_config_returns_config_error(
        self, tmp_path: Path, invalid_config_file: Path
    ) -> None:
        result = _run_cli("summarize", "--config", str(invalid_config_file), cwd=tmp_path)
        assert result.returncode == 2


class TestInfo:
    def test_info_runs_without_config(self) -> None:
        result = _run_cli("info")
        assert result.returncode == 0
        assert result.stdout == ""
        assert "seedscore_version" in result.stderr

    def test_log_level_option_is_accepted(self) -> None:
        result = _run_cli("info", "--log-level", "DEBUG")
        assert result.returncode == 0

    def test_info_reports_configured_settings(self, tmp_path: Path) -> None:
        config_file = tmp_path / "summary.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                summary:
                  config_version: "1.0.0"
                  report_path: "runs/result.txt"
                  show_undersized: true
            """),
            encoding="utf-8",
        )
        result = _run_cli("info", "--config", str(config_file), cwd=tmp_path)

        assert result.returncode == 0
        records = [json.loads(line) for line in result.stderr.splitlines()]
        info = next(r for r in records if r["msg"] == "System information")
        assert Path(info["report_path"]).resolve() == (tmp_path / "runs" / "result.txt").resolve()
        assert info["show_undersized"] is True

    def test_info_rejects_invalid_config(
        self, tmp_path: Path, invalid_config_file: Path
    ) -> None:
        result = _run_cli("info", "--config", str(invalid_config_file), cwd=tmp_path)
        assert result.returncode == 2  # CONFIG_ERROR
