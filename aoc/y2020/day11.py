"""2020 day 11: Seating System.

Seats are simulated as a flat boolean vector. Each seat has up to eight
neighbours stored as indices into that vector; missing neighbours point at a
sentinel slot that is never occupied, so one fancy-indexing sum counts the
occupied neighbours of every seat at once.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

import numpy as np

from ..errors import ParseError
from ..grid_utils import neighbour_offsets, parse_char_grid
from ..types import Coord

logger = logging.getLogger(__name__)

EMPTY = "L"
TAKEN = "#"
FLOOR = "."

NeighbourFinder = Callable[[np.ndarray, Coord, Coord], Coord]


def _adjacent(grid: np.ndarray, pos: Coord, step: Coord) -> Coord:
    return pos[0] + step[0], pos[1] + step[1]


def _visible(grid: np.ndarray, pos: Coord, step: Coord) -> Coord:
    rows, cols = grid.shape
    r, c = pos[0] + step[0], pos[1] + step[1]
    while 0 <= r < rows and 0 <= c < cols and grid[r, c] == FLOOR:
        r, c = r + step[0], c + step[1]
    return r, c


def parse_input(text: str) -> np.ndarray:
    grid = parse_char_grid(text)
    unknown = set(np.unique(grid)) - {EMPTY, TAKEN, FLOOR}
    if unknown:
        raise ParseError(f"unknown characters {sorted(unknown)}")
    return grid


def build_neighbours(grid: np.ndarray, find: NeighbourFinder) -> Tuple[np.ndarray, np.ndarray]:
    """Return the seat positions and their ``(n_seats, 8)`` neighbour matrix."""

    seats = np.argwhere(grid != FLOOR)
    index: Dict[Coord, int] = {(int(r), int(c)): i for i, (r, c) in enumerate(seats)}
    sentinel = len(seats)
    neighbours = np.full((len(seats), 8), sentinel, dtype=np.intp)
    steps = neighbour_offsets(2)
    for i, (r, c) in enumerate(seats):
        for j, step in enumerate(steps):
            neighbours[i, j] = index.get(find(grid, (int(r), int(c)), step), sentinel)
    return seats, neighbours


def simulate(grid: np.ndarray, find: NeighbourFinder, tolerance: int) -> int:
    """Run the seating rules to a fixpoint and count the occupied seats."""

    seats, neighbours = build_neighbours(grid, find)
    occupied = np.zeros(len(seats) + 1, dtype=bool)
    occupied[:-1] = grid[seats[:, 0], seats[:, 1]] == TAKEN

    rounds = 0
    while True:
        counts = occupied[neighbours].sum(axis=1)
        current = occupied[:-1]
        nxt = np.where(current, counts < tolerance, counts == 0)
        rounds += 1
        if np.array_equal(nxt, current):
            break
        occupied[:-1] = nxt
    logger.debug("seating settled after %d rounds", rounds)
    return int(occupied[:-1].sum())


def part1(text: str) -> int:
    return simulate(parse_input(text), _adjacent, tolerance=4)


def part2(text: str) -> int:
    return simulate(parse_input(text), _visible, tolerance=5)
