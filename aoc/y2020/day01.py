"""2020 day 1: Report Repair."""

from __future__ import annotations

from itertools import combinations

from ..constants import EXPENSE_TARGET
from ..errors import NoSolutionError
from ..strtools import to_nums


def part1(text: str, target: int = EXPENSE_TARGET) -> int:
    nums = to_nums(text)
    seen = set()
    for num in nums:
        other = target - num
        if other in seen:
            return num * other
        seen.add(num)
    raise NoSolutionError(f"no two entries add up to {target}")


def part2(text: str, target: int = EXPENSE_TARGET) -> int:
    for a, b, c in combinations(to_nums(text), 3):
        if a + b + c == target:
            return a * b * c
    raise NoSolutionError(f"no three entries add up to {target}")
