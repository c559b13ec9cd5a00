from __future__ import annotations

from itertools import product
from typing import Iterator, List, Tuple

import numpy as np

from .errors import ParseError

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def parse_char_grid(text: str) -> np.ndarray:
    """Parse a rectangular block of characters into a 2-D array.

    Parameters
    ----------
    text:
        Puzzle input, one grid row per line. Blank lines and surrounding
        whitespace are ignored.

    Returns
    -------
    numpy.ndarray
        Array of single characters with shape ``(rows, cols)``.

    Raises
    ------
    ParseError
        If the grid is empty or the rows differ in length.
    """

    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ParseError("grid cannot have 0 rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ParseError("each row must have the same number of columns")
    return np.array([list(row) for row in rows], dtype="<U1")


def bool_grid(text: str, on: str = "#") -> np.ndarray:
    """Parse ``text`` and mark the cells equal to ``on``."""

    return parse_char_grid(text) == on


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------
def orientations(arr: np.ndarray) -> Iterator[np.ndarray]:
    """Yield the eight rotations and reflections of a 2-D array."""

    for base in (arr, np.fliplr(arr)):
        for turns in range(4):
            yield np.rot90(base, turns)


def neighbour_offsets(ndim: int) -> List[Tuple[int, ...]]:
    """Offsets of every neighbour of a cell in ``ndim`` dimensions."""

    return [delta for delta in product((-1, 0, 1), repeat=ndim) if any(delta)]


__all__ = [
    "parse_char_grid",
    "bool_grid",
    "orientations",
    "neighbour_offsets",
]
