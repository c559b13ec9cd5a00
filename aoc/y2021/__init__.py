"""Advent of Code 2021."""

from __future__ import annotations

from ..harness import AOC, Day
from . import day01


def build() -> AOC:
    return AOC(2021).day(Day(1).part(1, day01.part1).part(2, day01.part2))


__all__ = ["build"]
