"""2020 day 16: Ticket Translation.

Field assignment works like a tiny constraint solver: every column starts with
all fields as candidates, tickets eliminate the fields their values violate,
and then columns with a single candidate (or fields with a single candidate
column) are fixed and removed from every other column until nothing changes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import prod
from typing import List, Optional, Set, Tuple

from ..errors import NoSolutionError, ParseError
from ..strtools import blocks, comma_nums

FIELD_RE = re.compile(r"^([^:]+): (\d+)-(\d+) or (\d+)-(\d+)$")

Ticket = List[int]


@dataclass(frozen=True)
class Field:
    name: str
    low: range
    high: range

    @classmethod
    def parse(cls, line: str) -> "Field":
        match = FIELD_RE.match(line.strip())
        if match is None:
            raise ParseError(f"invalid field {line!r}")
        name, a, b, c, d = match.groups()
        return cls(name, range(int(a), int(b) + 1), range(int(c), int(d) + 1))

    def is_valid(self, num: int) -> bool:
        return num in self.low or num in self.high


def error_rate(ticket: Ticket, fields: List[Field]) -> Optional[int]:
    """Sum of values that fit no field, or ``None`` for a valid ticket."""

    invalid = [num for num in ticket if not any(f.is_valid(num) for f in fields)]
    return sum(invalid) if invalid else None


def parse_input(text: str) -> Tuple[List[Field], Ticket, List[Ticket]]:
    sections = blocks(text)
    if len(sections) != 3:
        raise ParseError(f"expected 3 sections, found {len(sections)}")
    fields = [Field.parse(line) for line in sections[0].splitlines()]
    mine = sections[1].splitlines()[1:]
    if len(mine) != 1:
        raise ParseError("expected exactly one line for my ticket")
    ticket = comma_nums(mine[0])
    if len(ticket) != len(fields):
        raise ParseError(f"my ticket has {len(ticket)} values for {len(fields)} fields")
    nearby = [comma_nums(line) for line in sections[2].splitlines()[1:]]
    return fields, ticket, nearby


def _solve_single(options: List[Set[int]]) -> Optional[Tuple[int, int]]:
    for col, candidates in enumerate(options):
        if len(candidates) == 1:
            return col, next(iter(candidates))
    for field in set().union(*options):
        cols = [col for col, candidates in enumerate(options) if field in candidates]
        if len(cols) == 1:
            return cols[0], field
    return None


def solve_fields(fields: List[Field], tickets: List[Ticket]) -> List[int]:
    """Return, for every column, the index of the field it holds."""

    valid = [t for t in tickets if error_rate(t, fields) is None]
    options: List[Set[int]] = [set(range(len(fields))) for _ in fields]
    for ticket in valid:
        if len(ticket) != len(fields):
            raise ParseError("ticket length does not match the number of fields")
        for num, candidates in zip(ticket, options):
            candidates -= {idx for idx, f in enumerate(fields) if not f.is_valid(num)}

    result: List[Optional[int]] = [None] * len(fields)
    while True:
        single = _solve_single(options)
        if single is None:
            break
        col, field = single
        result[col] = field
        options[col] = set()
        for candidates in options:
            candidates.discard(field)

    if any(field is None for field in result):
        raise NoSolutionError("no solution for given fields")
    return [field for field in result if field is not None]


def part1(text: str) -> int:
    fields, _, nearby = parse_input(text)
    return sum(error_rate(ticket, fields) or 0 for ticket in nearby)


def part2(text: str, prefix: str = "departure") -> int:
    fields, mine, nearby = parse_input(text)
    columns = solve_fields(fields, nearby)
    return prod(val for col, val in enumerate(mine) if fields[columns[col]].name.startswith(prefix))
