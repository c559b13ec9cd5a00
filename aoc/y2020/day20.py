"""2020 day 20: Jurassic Jigsaw.

Tiles are square boolean arrays. Edges are compared as tuples read in a fixed
direction (top and bottom left-to-right, left and right top-to-bottom), so two
tiles fit side by side when ``right(a) == left(b)`` after choosing suitable
orientations. Puzzle inputs guarantee every interior edge matches exactly one
other tile, which lets the image be assembled greedily row by row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import isqrt, prod
from typing import Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from ..errors import NoSolutionError, ParseError
from ..grid_utils import bool_grid, orientations
from ..strtools import blocks

logger = logging.getLogger(__name__)

SEA_MONSTER = """\
                  # 
#    ##    ##    ###
 #  #  #  #  #  #   """

Edge = Tuple[bool, ...]


@dataclass
class Tile:
    num: int
    pixels: np.ndarray

    @classmethod
    def parse(cls, block: str) -> "Tile":
        header, _, body = block.strip().partition("\n")
        header = header.strip()
        if not (header.startswith("Tile ") and header.endswith(":")):
            raise ParseError(f"invalid tile header {header!r}")
        try:
            num = int(header[len("Tile ") : -1])
        except ValueError as exc:
            raise ParseError(f"invalid tile header {header!r}") from exc
        pixels = bool_grid(body)
        if pixels.shape[0] != pixels.shape[1]:
            raise ParseError(f"tile {num} must be square")
        return cls(num, pixels)

    def edge_keys(self) -> FrozenSet[Edge]:
        """The four edges, each in both reading directions."""

        keys = set()
        for edge in (self.pixels[0], self.pixels[-1], self.pixels[:, 0], self.pixels[:, -1]):
            keys.add(tuple(bool(v) for v in edge))
            keys.add(tuple(bool(v) for v in edge[::-1]))
        return frozenset(keys)


def _edge(arr: np.ndarray) -> Edge:
    return tuple(bool(v) for v in arr)


def parse_input(text: str) -> List[Tile]:
    tiles = [Tile.parse(block) for block in blocks(text)]
    if not tiles:
        raise ParseError("no tiles")
    return tiles


def _edge_counts(tiles: List[Tile]) -> Dict[Edge, int]:
    counts: Dict[Edge, int] = {}
    for tile in tiles:
        for key in tile.edge_keys():
            counts[key] = counts.get(key, 0) + 1
    return counts


def unmatched_sides(tile: Tile, counts: Dict[Edge, int]) -> int:
    """Number of sides of ``tile`` that no other tile shares."""

    p = tile.pixels
    return sum(1 for edge in (p[0], p[-1], p[:, 0], p[:, -1]) if counts[_edge(edge)] == 1)


def find_corners(tiles: List[Tile]) -> List[Tile]:
    counts = _edge_counts(tiles)
    return [tile for tile in tiles if unmatched_sides(tile, counts) == 2]


def part1(text: str) -> int:
    corners = find_corners(parse_input(text))
    if len(corners) != 4:
        raise NoSolutionError(f"expected 4 corner tiles, found {len(corners)}")
    return prod(tile.num for tile in corners)


def _fit(remaining: Dict[int, Tile], want_left: Optional[Edge], want_top: Optional[Edge]) -> Tuple[int, np.ndarray]:
    for num, tile in remaining.items():
        for arr in orientations(tile.pixels):
            if want_left is not None and _edge(arr[:, 0]) != want_left:
                continue
            if want_top is not None and _edge(arr[0]) != want_top:
                continue
            return num, arr
    raise NoSolutionError("no tile fits the next position")


def assemble(tiles: List[Tile]) -> np.ndarray:
    """Lay out ``tiles`` into a square and return the image without borders."""

    side = isqrt(len(tiles))
    if side * side != len(tiles):
        raise ParseError(f"{len(tiles)} tiles cannot form a square")
    counts = _edge_counts(tiles)
    corners = find_corners(tiles)
    if not corners:
        raise NoSolutionError("no corner tile found")

    start = corners[0]
    for arr in orientations(start.pixels):
        if counts[_edge(arr[0])] == 1 and counts[_edge(arr[:, 0])] == 1:
            break
    else:
        raise NoSolutionError(f"corner tile {start.num} has no outward orientation")

    remaining = {tile.num: tile for tile in tiles if tile.num != start.num}
    grid: List[List[np.ndarray]] = [[arr]]
    for r in range(side):
        if r > 0:
            num, arr = _fit(remaining, None, _edge(grid[r - 1][0][-1]))
            del remaining[num]
            grid.append([arr])
        for c in range(1, side):
            above = _edge(grid[r - 1][c][-1]) if r > 0 else None
            num, arr = _fit(remaining, _edge(grid[r][c - 1][:, -1]), above)
            del remaining[num]
            grid[r].append(arr)
    logger.debug("assembled %dx%d tiles", side, side)
    return np.block([[arr[1:-1, 1:-1] for arr in row] for row in grid])


def monster_offsets() -> np.ndarray:
    return np.array(
        [(r, c) for r, line in enumerate(SEA_MONSTER.splitlines()) for c, ch in enumerate(line) if ch == "#"]
    )


def water_roughness(image: np.ndarray) -> int:
    """Count ``#`` not covered by a sea monster in the orientation that has any."""

    offsets = monster_offsets()
    height, width = offsets.max(axis=0) + 1
    for arr in orientations(image):
        covered = np.zeros_like(arr, dtype=bool)
        found = 0
        for r in range(arr.shape[0] - height + 1):
            for c in range(arr.shape[1] - width + 1):
                rows = offsets[:, 0] + r
                cols = offsets[:, 1] + c
                if arr[rows, cols].all():
                    covered[rows, cols] = True
                    found += 1
        if found:
            logger.debug("found %d sea monsters", found)
            return int((arr & ~covered).sum())
    raise NoSolutionError("no sea monsters in any orientation")


def part2(text: str) -> int:
    return water_roughness(assemble(parse_input(text)))
