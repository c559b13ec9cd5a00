"""2020 day 4: Passport Processing."""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from ..errors import ParseError
from ..strtools import blocks

REQUIRED_KEYS = frozenset(["byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"])
EYE_COLOURS = frozenset(["amb", "blu", "brn", "gry", "grn", "hzl", "oth"])

Passport = Dict[str, str]


def _number_between(low: int, high: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return value.isdigit() and low <= int(value) <= high

    return check


def _valid_height(value: str) -> bool:
    if value.endswith("cm"):
        return _number_between(150, 193)(value[:-2])
    if value.endswith("in"):
        return _number_between(59, 76)(value[:-2])
    return False


VALIDATORS: Dict[str, Callable[[str], bool]] = {
    "byr": _number_between(1920, 2002),
    "iyr": _number_between(2010, 2020),
    "eyr": _number_between(2020, 2030),
    "hgt": _valid_height,
    "hcl": lambda value: re.fullmatch(r"#[0-9a-f]{6}", value) is not None,
    "ecl": lambda value: value in EYE_COLOURS,
    "pid": lambda value: re.fullmatch(r"[0-9]{9}", value) is not None,
}


def parse_passport(record: str) -> Passport:
    passport: Passport = {}
    for field in record.split():
        key, sep, value = field.partition(":")
        if not sep:
            raise ParseError(f"field {field!r} has no value")
        passport[key] = value
    return passport


def parse_input(text: str) -> List[Passport]:
    return [parse_passport(record) for record in blocks(text)]


def has_required_keys(passport: Passport) -> bool:
    return REQUIRED_KEYS <= passport.keys()


def is_valid(passport: Passport) -> bool:
    return has_required_keys(passport) and all(check(passport[key]) for key, check in VALIDATORS.items())


def part1(text: str) -> int:
    return sum(1 for passport in parse_input(text) if has_required_keys(passport))


def part2(text: str) -> int:
    return sum(1 for passport in parse_input(text) if is_valid(passport))
