"""aoc.cli
==========

Command-line entry point: pick a year, day and optionally a part, read the
puzzle input from a file (or ``-`` for stdin) and print the answers.
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import List, Optional

from .constants import FAIL_LOG
from .errors import AocError
from .logging_utils import configure_logging, log_failure
from .registry import YEARS, get_year, latest_year

logger = logging.getLogger(__name__)


def read_input(source: str) -> str:
    """Return the puzzle text from ``source``; ``-`` means stdin."""

    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("aoc", description="Advent of Code solvers")
    parser.add_argument("input", metavar="INPUT", help="Puzzle input file, or - for stdin")
    parser.add_argument(
        "-y",
        "--year",
        type=int,
        default=latest_year(),
        help=f"Year to solve (available: {', '.join(map(str, sorted(YEARS)))})",
    )
    parser.add_argument("-d", "--day", type=int, default=None, help="Day to solve (default: latest solved day)")
    parser.add_argument("-p", "--part", type=int, default=None, help="Only solve this part")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument(
        "--fail-log",
        metavar="PATH",
        default=None,
        help=f"Append failed parts as JSON lines to PATH (e.g. {FAIL_LOG})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments, run the selected solvers and print the result."""

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        text = read_input(args.input)
    except OSError as exc:
        print(f"Error: {exc}")
        return 1

    on_error = partial(log_failure, path=args.fail_log) if args.fail_log else None
    try:
        aoc = get_year(args.year)
        output = aoc.run(args.day, text, part=args.part, on_error=on_error)
    except AocError as exc:
        print(f"Error: {exc}")
        return 1

    print(output, end="")
    return 0


__all__ = ["main", "read_input", "build_parser"]
