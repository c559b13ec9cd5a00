"""2021 day 1: Sonar Sweep."""

from __future__ import annotations

from typing import Sequence

from ..strtools import to_nums


def count_increases(depths: Sequence[int], window: int = 1) -> int:
    """Count how often a ``window``-wide sliding sum grows.

    Consecutive windows share all but one element, so comparing the sums is the
    same as comparing ``depths[i]`` with ``depths[i + window]``.
    """

    return sum(1 for a, b in zip(depths, depths[window:]) if b > a)


def part1(text: str) -> int:
    return count_increases(to_nums(text))


def part2(text: str) -> int:
    return count_increases(to_nums(text), window=3)
