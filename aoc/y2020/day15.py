"""2020 day 15: Rambunctious Recitation."""

from __future__ import annotations

import logging
from typing import List

from ..errors import ParseError
from ..strtools import comma_nums

logger = logging.getLogger(__name__)


def play(starting: List[int], turns: int) -> int:
    """Return the number spoken on turn ``turns`` of the memory game.

    ``last_seen[n]`` holds the turn on which ``n`` was last spoken (0 when
    never). A flat list is far faster than a dict for tens of millions of
    turns.
    """

    if not starting:
        raise ParseError("no starting numbers")
    if turns <= len(starting):
        return starting[turns - 1]

    last_seen = [0] * max(turns, max(starting) + 1)
    for turn, num in enumerate(starting[:-1], start=1):
        last_seen[num] = turn
    spoken = starting[-1]
    for turn in range(len(starting), turns):
        previous = last_seen[spoken]
        last_seen[spoken] = turn
        spoken = turn - previous if previous else 0
    logger.debug("memory game reached turn %d", turns)
    return spoken


def part1(text: str, turns: int = 2020) -> int:
    return play(comma_nums(text), turns)


def part2(text: str, turns: int = 30_000_000) -> int:
    return play(comma_nums(text), turns)
