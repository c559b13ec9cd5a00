"""Advent of Code 2019."""

from __future__ import annotations

from ..harness import AOC, Day
from . import day01, day02, day03


def build() -> AOC:
    return (
        AOC(2019)
        .day(Day(1).part(1, day01.part1).part(2, day01.part2))
        .day(Day(2).part(1, day02.part1).part(2, day02.part2))
        .day(Day(3).part(1, day03.part1).part(2, day03.part2))
    )


__all__ = ["build"]
