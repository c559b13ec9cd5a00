"""2020 day 12: Rain Risk."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from ..errors import ParseError
from ..types import EAST, NORTH, ORIGIN, SOUTH, WEST, Point

COMPASS = {"N": NORTH, "E": EAST, "S": SOUTH, "W": WEST}


@dataclass(frozen=True)
class Ferry:
    position: Point = ORIGIN
    heading: Point = EAST
    waypoint: Point = Point(10, 1)

    def steer(self, action: str, value: int) -> "Ferry":
        """Part one rules: compass moves shift the ship, turns change heading."""

        if action in COMPASS:
            return replace(self, position=self.position + COMPASS[action] * value)
        if action == "L":
            return replace(self, heading=self.heading.turn(value))
        if action == "R":
            return replace(self, heading=self.heading.turn(-value))
        if action == "F":
            return replace(self, position=self.position + self.heading * value)
        raise ParseError(f"unknown action {action!r}")

    def navigate(self, action: str, value: int) -> "Ferry":
        """Part two rules: compass moves and turns act on the waypoint."""

        if action in COMPASS:
            return replace(self, waypoint=self.waypoint + COMPASS[action] * value)
        if action == "L":
            return replace(self, waypoint=self.waypoint.turn(value))
        if action == "R":
            return replace(self, waypoint=self.waypoint.turn(-value))
        if action == "F":
            return replace(self, position=self.position + self.waypoint * value)
        raise ParseError(f"unknown action {action!r}")


def parse_input(text: str) -> List[Tuple[str, int]]:
    instructions = []
    for line in text.split():
        try:
            instructions.append((line[0], int(line[1:])))
        except ValueError as exc:
            raise ParseError(f"invalid instruction {line!r}") from exc
    return instructions


def part1(text: str) -> int:
    ferry = Ferry()
    for action, value in parse_input(text):
        ferry = ferry.steer(action, value)
    return ferry.position.manhattan()


def part2(text: str) -> int:
    ferry = Ferry()
    for action, value in parse_input(text):
        ferry = ferry.navigate(action, value)
    return ferry.position.manhattan()
