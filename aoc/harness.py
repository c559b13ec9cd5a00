"""aoc.harness
===============

Dispatch table mapping (day, part) pairs to solver callables. A solver is any
function taking the puzzle input text and returning something with a string
form; the harness takes care of formatting the answer and of turning solver
failures into a readable message so one broken part never aborts a run.

Typical use mirrors the builder style of the year packages::

    aoc = AOC(2020).day(Day(1).part(1, day01.part1).part(2, day01.part2))
    print(aoc.run(1, text))
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from .errors import UnknownDayError, UnknownPartError
from .types import Solver

logger = logging.getLogger(__name__)

FailureHook = Callable[[int, int, int, BaseException], None]


class Part:
    """A single numbered answer of a day and the solver that produces it."""

    def __init__(self, part: int, solver: Solver) -> None:
        if part <= 0:
            raise ValueError(f"part numbers start at 1, got {part}")
        self.part = part
        self.solver = solver

    def solve(self, text: str, on_error: Optional[Callable[[BaseException], None]] = None) -> str:
        """Run the solver against ``text`` and return its display string."""

        try:
            result = self.solver(text)
        except Exception as exc:
            logger.warning("part %d failed: %s", self.part, exc, exc_info=logger.isEnabledFor(logging.DEBUG))
            if on_error is not None:
                on_error(exc)
            return f"Error: {exc}"
        return str(result)

    def __repr__(self) -> str:
        name = getattr(self.solver, "__qualname__", repr(self.solver))
        return f"Part({self.part}, {name})"


class Day:
    """All registered parts of one puzzle day."""

    def __init__(self, day: int) -> None:
        if day <= 0:
            raise ValueError(f"day numbers start at 1, got {day}")
        self.day = day
        self.parts: List[Part] = []

    def part(self, part: int, solver: Solver) -> "Day":
        """Register ``solver`` as ``part`` and return ``self`` for chaining."""

        if any(existing.part == part for existing in self.parts):
            raise ValueError(f"day {self.day} already has a part {part}")
        self.parts.append(Part(part, solver))
        return self

    def get_part(self, part: int) -> Part:
        for candidate in self.parts:
            if candidate.part == part:
                return candidate
        available = [p.part for p in self.parts]
        raise UnknownPartError(f"day {self.day} has no part {part}. Available parts: {available}")

    def solve(
        self,
        text: str,
        part: Optional[int] = None,
        on_error: Optional[Callable[[int, BaseException], None]] = None,
    ) -> str:
        """Solve the selected part, or every part in registration order."""

        selected = [self.get_part(part)] if part is not None else self.parts
        out: List[str] = []
        for entry in selected:
            logger.debug("solving day %d part %d", self.day, entry.part)
            hook = None
            if on_error is not None:
                hook = lambda exc, number=entry.part: on_error(number, exc)
            out.append(f"Part: {entry.part}\n")
            out.append(f"Solution: {entry.solve(text, hook)}\n\n")
        return "".join(out)

    def __repr__(self) -> str:
        return f"Day({self.day}, parts={[p.part for p in self.parts]})"


class AOC:
    """Collection of the solved days of one Advent of Code year."""

    def __init__(self, year: int) -> None:
        self.year = year
        self._days: Dict[int, Day] = {}

    def day(self, day: Day) -> "AOC":
        """Register ``day`` and return ``self`` for chaining."""

        if day.day in self._days:
            raise ValueError(f"day {day.day} registered twice for {self.year}")
        self._days[day.day] = day
        return self

    @property
    def days(self) -> List[int]:
        return sorted(self._days)

    def get_day(self, day: int) -> Day:
        try:
            return self._days[day]
        except KeyError:
            raise UnknownDayError(f"no solution for day {day} of {self.year}. Available days: {self.days}") from None

    def run(
        self,
        day: Optional[int],
        text: str,
        part: Optional[int] = None,
        on_error: Optional[FailureHook] = None,
    ) -> str:
        """Run one day against ``text`` and return the formatted answers.

        Parameters
        ----------
        day:
            Day to run. ``None`` selects the latest registered day.
        text:
            Puzzle input handed unchanged to every selected part.
        part:
            Restrict the run to a single part.
        on_error:
            Called with ``(year, day, part, exception)`` for each failing part.
        """

        if day is None:
            if not self._days:
                raise UnknownDayError(f"no days registered for {self.year}")
            day = self.days[-1]
        entry = self.get_day(day)
        hook = None
        if on_error is not None:
            hook = lambda number, exc: on_error(self.year, entry.day, number, exc)
        logger.info("running %d day %d", self.year, entry.day)
        return f"AOC {self.year} day {entry.day}\n" + entry.solve(text, part, hook)

    def __repr__(self) -> str:
        return f"AOC({self.year}, days={self.days})"


__all__ = ["AOC", "Day", "Part", "FailureHook"]
