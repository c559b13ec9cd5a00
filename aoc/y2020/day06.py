"""2020 day 6: Custom Customs."""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase
from typing import FrozenSet, List

from ..errors import ParseError
from ..strtools import blocks

QUESTIONS = frozenset(ascii_lowercase)


@dataclass
class CustomsForm:
    """Answers of one group: questions anyone and everyone said yes to."""

    anyone: FrozenSet[str]
    everyone: FrozenSet[str]

    @classmethod
    def parse(cls, group: str) -> "CustomsForm":
        anyone: FrozenSet[str] = frozenset()
        everyone = QUESTIONS
        for line in group.split():
            person = frozenset(line)
            if not person <= QUESTIONS:
                raise ParseError("invalid character in customs form")
            anyone |= person
            everyone &= person
        return cls(anyone, everyone)


def parse_input(text: str) -> List[CustomsForm]:
    return [CustomsForm.parse(group) for group in blocks(text)]


def part1(text: str) -> int:
    return sum(len(form.anyone) for form in parse_input(text))


def part2(text: str) -> int:
    return sum(len(form.everyone) for form in parse_input(text))
