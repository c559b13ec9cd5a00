"""2020 day 3: Toboggan Trajectory."""

from __future__ import annotations

from math import prod

import numpy as np

from ..grid_utils import bool_grid

SLOPES = [(1, 1), (3, 1), (5, 1), (7, 1), (1, 2)]


def count_trees(trees: np.ndarray, right: int, down: int) -> int:
    """Trees hit going ``right``/``down`` per step; the map repeats sideways."""

    rows = np.arange(0, trees.shape[0], down)
    cols = (np.arange(len(rows)) * right) % trees.shape[1]
    return int(trees[rows, cols].sum())


def part1(text: str) -> int:
    return count_trees(bool_grid(text), 3, 1)


def part2(text: str) -> int:
    trees = bool_grid(text)
    return prod(count_trees(trees, right, down) for right, down in SLOPES)
