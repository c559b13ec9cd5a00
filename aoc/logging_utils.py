"""aoc.logging_utils
====================

Logging setup for the CLI and a JSON-lines log of failed parts, handy for
collecting the puzzles that still need work.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .constants import FAIL_LOG, LOG_DATEFMT, LOG_FORMAT


def configure_logging(verbose: int = 0) -> None:
    """Send log records to stderr; ``-v`` shows info, ``-vv`` debug."""

    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT, force=True)


def log_failure(
    year: int,
    day: int,
    part: int,
    error: BaseException,
    path: Union[str, Path] = FAIL_LOG,
) -> None:
    """Append a JSON line describing a failed part to ``path``."""

    entry = {
        "year": year,
        "day": day,
        "part": part,
        "error": type(error).__name__,
        "message": str(error),
    }
    with Path(path).open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["configure_logging", "log_failure"]
