"""2019 day 3: Crossed Wires."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..errors import NoSolutionError, ParseError
from ..types import EAST, NORTH, ORIGIN, SOUTH, WEST, Point

DIRECTIONS = {"R": EAST, "L": WEST, "U": NORTH, "D": SOUTH}


@dataclass
class Line:
    """Axis-aligned wire segment with ``start <= end``."""

    start: Point
    end: Point

    @classmethod
    def between(cls, a: Point, b: Point) -> "Line":
        return cls(a, b) if a < b else cls(b, a)


def parse_motion(motion: str) -> Tuple[Point, int]:
    motion = motion.strip()
    if not motion or motion[0] not in DIRECTIONS:
        raise ParseError(f"invalid motion {motion!r}")
    try:
        length = int(motion[1:])
    except ValueError as exc:
        raise ParseError(f"invalid motion length in {motion!r}") from exc
    return DIRECTIONS[motion[0]], length


def parse_lines(wire: str) -> List[Line]:
    """Turn a wire description into its segments, starting at the origin."""

    lines = []
    cur = ORIGIN
    for motion in wire.split(","):
        direction, length = parse_motion(motion)
        nxt = cur + direction * length
        lines.append(Line.between(cur, nxt))
        cur = nxt
    return lines


def trace(wire: str) -> Dict[Point, int]:
    """Map every point the wire visits to the step count of its first visit."""

    visited: Dict[Point, int] = {}
    cur = ORIGIN
    steps = 0
    for motion in wire.split(","):
        direction, length = parse_motion(motion)
        for _ in range(length):
            cur = cur + direction
            steps += 1
            visited.setdefault(cur, steps)
    return visited


def _wires(text: str) -> Tuple[Dict[Point, int], Dict[Point, int]]:
    wires = [line.strip() for line in text.splitlines() if line.strip()]
    if len(wires) != 2:
        raise ParseError(f"expected 2 wires, found {len(wires)}")
    return trace(wires[0]), trace(wires[1])


def part1(text: str) -> int:
    first, second = _wires(text)
    crossings = first.keys() & second.keys()
    if not crossings:
        raise NoSolutionError("wires never cross")
    return min(point.manhattan() for point in crossings)


def part2(text: str) -> int:
    first, second = _wires(text)
    crossings = first.keys() & second.keys()
    if not crossings:
        raise NoSolutionError("wires never cross")
    return min(first[point] + second[point] for point in crossings)
