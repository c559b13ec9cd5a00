"""2020 day 10: Adapter Array."""

from __future__ import annotations

from collections import Counter

from ..strtools import to_nums


def part1(text: str) -> int:
    chain = [0] + sorted(to_nums(text))
    diffs = Counter(b - a for a, b in zip(chain, chain[1:]))
    # the device is always three jolts above the last adapter
    return diffs[1] * (diffs[3] + 1)


def part2(text: str) -> int:
    """Count arrangements by summing the ways to reach each joltage."""

    ways = {0: 1}
    for adapter in sorted(to_nums(text)):
        ways[adapter] = sum(ways.get(adapter - step, 0) for step in (1, 2, 3))
    return ways[max(ways)]
