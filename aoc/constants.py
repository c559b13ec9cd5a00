"""aoc.constants
================

Global constants used across the solvers. Keeping them here avoids magic
numbers in the day modules and makes the configurable paths easy to find.
"""

from __future__ import annotations

FAIL_LOG = "failed_parts.jsonl"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# 2019
INTCODE_TARGET = 19690720

# 2020
EXPENSE_TARGET = 2020
CRAB_CUPS_TOTAL = 1_000_000
CRAB_CUPS_MOVES = 10_000_000
HANDSHAKE_SUBJECT = 7
HANDSHAKE_MODULUS = 20201227

__all__ = [
    "FAIL_LOG",
    "LOG_FORMAT",
    "LOG_DATEFMT",
    "INTCODE_TARGET",
    "EXPENSE_TARGET",
    "CRAB_CUPS_TOTAL",
    "CRAB_CUPS_MOVES",
    "HANDSHAKE_SUBJECT",
    "HANDSHAKE_MODULUS",
]
