# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for seedscore.

Every operation is a subcommand of `seedscore`. The global options
(--config, --log-level) are inherited by every subcommand through argparse's
parent parser mechanism.

Usage:
    seedscore summarize
    seedscore summarize 100 --report runs/result.txt --show-undersized
    seedscore info --log-level DEBUG
"""

import argparse
import sys

from seedscore.cli.commands import handle_info, handle_summarize
from seedscore.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    add_help=False so help text doesn't collide between the parent and the
    subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (default: config value, else INFO).",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """Register all subcommands with their handler functions."""
    commands = [
        ("summarize", "Print seed diagnostics and the mean score of a result log.", handle_summarize),
        ("info", "Display environment and config info.", handle_info),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=[parent], help=help_text)
        parser.set_defaults(func=handler)

    summarize_parser = subparsers.choices["summarize"]
    summarize_parser.add_argument(
        "num",
        nargs="?",
        type=str,
        default=None,
        help="Record count passed by the runner scripts. Accepted as-is, not used.",
    )
    summarize_parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Result log to read (default: config value, else ./result.txt).",
    )
    summarize_parser.add_argument(
        "--show-undersized",
        action="store_true",
        default=None,
        dest="show_undersized",
        help="Also print the runs whose board size is 14 or less.",
    )


def main() -> None:
    """
    Main CLI entrypoint, referenced by pyproject.toml's [project.scripts].

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="seedscore",
        description="seedscore: summarize per-seed scores from a result log.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
