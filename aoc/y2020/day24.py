"""2020 day 24: Lobby Layout.

Hex tiles use axial coordinates: ``e``/``w`` move along ``q`` and ``ne``/``sw``
along ``r``.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Set, Tuple

from ..errors import ParseError

Hex = Tuple[int, int]

DIRECTIONS: Dict[str, Hex] = {
    "e": (1, 0),
    "w": (-1, 0),
    "ne": (0, 1),
    "nw": (-1, 1),
    "se": (1, -1),
    "sw": (0, -1),
}
STEP_RE = re.compile(r"e|w|ne|nw|se|sw")


def locate(line: str) -> Hex:
    """Follow a run of directions from the reference tile."""

    line = line.strip()
    steps = STEP_RE.findall(line)
    if sum(len(step) for step in steps) != len(line):
        raise ParseError(f"invalid direction in {line!r}")
    q = r = 0
    for step in steps:
        dq, dr = DIRECTIONS[step]
        q, r = q + dq, r + dr
    return q, r


def black_tiles(text: str) -> Set[Hex]:
    flips = Counter(locate(line) for line in text.splitlines() if line.strip())
    return {tile for tile, count in flips.items() if count % 2 == 1}


def live_one_day(black: Set[Hex]) -> Set[Hex]:
    """Black tiles with 0 or >2 black neighbours flip white; white with 2 flip black."""

    neighbours: Counter = Counter(
        (q + dq, r + dr) for q, r in black for dq, dr in DIRECTIONS.values()
    )
    return {
        tile
        for tile, count in neighbours.items()
        if count == 2 or (count == 1 and tile in black)
    }


def part1(text: str) -> int:
    return len(black_tiles(text))


def part2(text: str, days: int = 100) -> int:
    black = black_tiles(text)
    for _ in range(days):
        black = live_one_day(black)
    return len(black)
