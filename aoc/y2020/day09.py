"""2020 day 9: Encoding Error."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable, List

from ..errors import NoSolutionError, ParseError
from ..strtools import to_nums

PREAMBLE = 25


class XmasWindow:
    """Sliding window that tracks the pairwise sums of its members."""

    def __init__(self, preamble: Iterable[int]) -> None:
        self.nums: deque = deque()
        self.sums: Counter = Counter()
        for num in preamble:
            self._push(num)

    def is_valid(self, num: int) -> bool:
        return self.sums[num] > 0

    def push(self, num: int) -> None:
        """Add ``num`` and drop the oldest member."""

        old = self.nums.popleft()
        for other in self.nums:
            if other != old:
                self.sums[old + other] -= 1
        self._push(num)

    def _push(self, num: int) -> None:
        for other in self.nums:
            if other != num:
                self.sums[num + other] += 1
        self.nums.append(num)


def first_invalid(nums: List[int], preamble: int = PREAMBLE) -> int:
    if len(nums) < preamble:
        raise ParseError("input too short")
    window = XmasWindow(nums[:preamble])
    for num in nums[preamble:]:
        if not window.is_valid(num):
            return num
        window.push(num)
    raise NoSolutionError("input is valid")


def find_weakness(nums: List[int], target: int) -> int:
    """Min + max of a contiguous run (at least two long) summing to ``target``."""

    start = 0
    total = 0
    for end, num in enumerate(nums):
        total += num
        while total > target and start < end:
            total -= nums[start]
            start += 1
        if total == target and end > start:
            run = nums[start : end + 1]
            return min(run) + max(run)
    raise NoSolutionError("target sum not found")


def part1(text: str, preamble: int = PREAMBLE) -> int:
    return first_invalid(to_nums(text), preamble)


def part2(text: str, preamble: int = PREAMBLE) -> int:
    nums = to_nums(text)
    return find_weakness(nums, first_invalid(nums, preamble))
