"""aoc.types
=============

Foundational type aliases and lightweight data structures shared by the
solvers. Day modules that need a 2-D position or a solver signature import
them from here so every file agrees on the same representation.

The module stays definitions-only: importing it never triggers runtime side
effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple

# ---------------------------------------------------------------------------
# Harness signatures
# ---------------------------------------------------------------------------
Solver = Callable[[str], Any]
YearBuilder = Callable[[], Any]

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
Coord = Tuple[int, int]


@dataclass(frozen=True, order=True)
class Point:
    """Integer position on an unbounded plane.

    ``x`` grows to the east and ``y`` to the north. Points are hashable and
    ordered so they can be stored in sets and used to normalise segments.
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: int) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y)

    def turn(self, degrees: int) -> "Point":
        """Rotate counter-clockwise about the origin by a multiple of 90."""

        degrees %= 360
        if degrees == 0:
            return self
        if degrees == 90:
            return Point(-self.y, self.x)
        if degrees == 180:
            return Point(-self.x, -self.y)
        if degrees == 270:
            return Point(self.y, -self.x)
        raise ValueError(f"can only turn by multiples of 90, got {degrees}")


ORIGIN = Point(0, 0)
NORTH = Point(0, 1)
EAST = Point(1, 0)
SOUTH = Point(0, -1)
WEST = Point(-1, 0)

__all__ = [
    "Solver",
    "YearBuilder",
    "Coord",
    "Point",
    "ORIGIN",
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
]
