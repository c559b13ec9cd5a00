"""2020 day 2: Password Philosophy."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from ..errors import ParseError

LINE_RE = re.compile(r"^(\d+)-(\d+) (\w): (\S*)$")


@dataclass
class PasswordPolicy:
    low: int
    high: int
    letter: str

    def check(self, password: str) -> bool:
        """Sled rental rule: the letter count lies within ``low..high``."""

        return self.low <= password.count(self.letter) <= self.high

    def check_positions(self, password: str) -> bool:
        """Toboggan rule: exactly one of the 1-based positions holds the letter."""

        first = password[self.low - 1 : self.low] == self.letter
        second = password[self.high - 1 : self.high] == self.letter
        return first != second


def parse_input(text: str) -> List[Tuple[PasswordPolicy, str]]:
    entries = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = LINE_RE.match(line)
        if match is None:
            raise ParseError(f"invalid password line {line!r}")
        low, high, letter, password = match.groups()
        entries.append((PasswordPolicy(int(low), int(high), letter), password))
    return entries


def part1(text: str) -> int:
    return sum(1 for policy, password in parse_input(text) if policy.check(password))


def part2(text: str) -> int:
    return sum(1 for policy, password in parse_input(text) if policy.check_positions(password))
