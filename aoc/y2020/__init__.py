"""Advent of Code 2020."""

from __future__ import annotations

from ..harness import AOC, Day
from . import (
    day01,
    day02,
    day03,
    day04,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)

TWO_PART_DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
    18: day18,
    19: day19,
    20: day20,
    21: day21,
    22: day22,
    23: day23,
    24: day24,
}


def build() -> AOC:
    aoc = AOC(2020)
    for number, module in TWO_PART_DAYS.items():
        aoc.day(Day(number).part(1, module.part1).part(2, module.part2))
    # the last day only has one puzzle
    aoc.day(Day(25).part(1, day25.part1))
    return aoc


__all__ = ["build"]
