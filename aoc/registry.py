"""aoc.registry
================

Central registry mapping years to the builders of their :class:`~aoc.harness.AOC`
tables. The CLI relies on this dictionary to find the solvers for a year.
"""

from __future__ import annotations

from typing import Dict

from . import y2019, y2020, y2021
from .errors import UnknownYearError
from .harness import AOC
from .types import YearBuilder

YEARS: Dict[int, YearBuilder] = {
    2019: y2019.build,
    2020: y2020.build,
    2021: y2021.build,
}


def get_year(year: int) -> AOC:
    """Build the solver table for ``year`` with a helpful error."""

    try:
        builder = YEARS[year]
    except KeyError:
        raise UnknownYearError(f"no solutions for {year}. Available years: {sorted(YEARS)}") from None
    return builder()


def latest_year() -> int:
    return max(YEARS)


__all__ = ["YEARS", "get_year", "latest_year"]
