"""2020 day 23: Crab Cups.

The circle is a successor array: ``after[label]`` is the label of the cup
clockwise of ``label``. Every move is then a constant number of index updates.
"""

from __future__ import annotations

import logging
from typing import List

from ..constants import CRAB_CUPS_MOVES, CRAB_CUPS_TOTAL
from ..errors import ParseError

logger = logging.getLogger(__name__)


def parse_input(text: str) -> List[int]:
    labels = text.strip()
    if not labels.isdigit():
        raise ParseError(f"invalid cup labels {labels!r}")
    cups = [int(ch) for ch in labels]
    if sorted(cups) != list(range(1, len(cups) + 1)):
        raise ParseError("cup labels must be 1..n without gaps")
    return cups


def play(cups: List[int], moves: int, total: int = 0) -> List[int]:
    """Play ``moves`` rounds and return the successor array.

    When ``total`` exceeds the number of labelled cups, the circle is filled
    up with the labels ``len(cups) + 1 .. total`` in order.
    """

    order = cups + list(range(len(cups) + 1, total + 1))
    highest = len(order)
    after = [0] * (highest + 1)
    for cur, nxt in zip(order, order[1:] + order[:1]):
        after[cur] = nxt

    current = order[0]
    for _ in range(moves):
        a = after[current]
        b = after[a]
        c = after[b]
        dest = current - 1 or highest
        while dest in (a, b, c):
            dest = dest - 1 or highest
        after[current] = after[c]
        after[c] = after[dest]
        after[dest] = a
        current = after[current]
    logger.debug("played %d moves with %d cups", moves, highest)
    return after


def labels_after_one(after: List[int]) -> str:
    out = []
    cup = after[1]
    while cup != 1:
        out.append(str(cup))
        cup = after[cup]
    return "".join(out)


def part1(text: str, moves: int = 100) -> str:
    return labels_after_one(play(parse_input(text), moves))


def part2(text: str, moves: int = CRAB_CUPS_MOVES, total: int = CRAB_CUPS_TOTAL) -> int:
    after = play(parse_input(text), moves, total)
    first = after[1]
    return first * after[first]
