"""2020 day 17: Conway Cubes."""

from __future__ import annotations

import numpy as np

from ..grid_utils import bool_grid, neighbour_offsets

CYCLES = 6


def step(active: np.ndarray) -> np.ndarray:
    """One cycle of n-dimensional life.

    The space is padded by one inactive layer in every direction first; rolling
    the padded array then wraps only inactive cells, so the neighbour sums need
    no boundary handling.
    """

    grid = np.pad(active, 1).astype(np.int8)
    axes = tuple(range(grid.ndim))
    counts = np.zeros(grid.shape, dtype=np.int8)
    for offset in neighbour_offsets(grid.ndim):
        counts += np.roll(grid, offset, axis=axes)
    alive = grid.astype(bool)
    return (alive & ((counts == 2) | (counts == 3))) | (~alive & (counts == 3))


def boot(text: str, ndim: int, cycles: int = CYCLES) -> int:
    plane = bool_grid(text)
    active = plane.reshape((1,) * (ndim - 2) + plane.shape)
    for _ in range(cycles):
        active = step(active)
    return int(active.sum())


def part1(text: str) -> int:
    return boot(text, ndim=3)


def part2(text: str) -> int:
    return boot(text, ndim=4)
