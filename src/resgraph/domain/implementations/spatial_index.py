"""Uniform grid partition of 3-D points for cutoff-based neighbour search."""

import itertools
import logging
import math
from typing import Dict, Iterator, List, Tuple

import numpy as np

from ...config import SCALE
from ...utils.geometry import as_points
from ..models.box import Box, GridCoord

logger = logging.getLogger(__name__)

_ALL_OFFSETS: List[Tuple[int, int, int]] = [
    offset
    for offset in itertools.product((-1, 0, 1), repeat=3)
    if offset != (0, 0, 0)
]
# One of each +/- pair of offsets, so every pair of cells is visited once
_HALF_SHELL_OFFSETS: List[Tuple[int, int, int]] = [
    offset for offset in _ALL_OFFSETS if offset > (0, 0, 0)
]


def cell_size_for(cutoff: float) -> int:
    """Cell edge in scaled units for a cutoff.

    This is floor(cutoff * SCALE) for cutoffs given to 0.01A. Round-off such as
    4.1 * 100 == 409.99999999999994 is absorbed, and finer cutoffs round up, so a
    cell is never smaller than the cutoff.
    """
    return max(1, int(math.ceil(round(cutoff * SCALE, 6))))


class SpatialIndex:
    """Points binned into cubic cells with an edge equal to the cutoff.

    Two points within the cutoff of each other are always in the same cell or in
    adjacent cells, so only those need a distance evaluation.

    Args:
        i_points: ``(n, 3)`` coordinates of the first side
        j_points: ``(m, 3)`` coordinates of the second side, or None for
            undirected searches where both sides are ``i_points``
        cutoff: Distance cutoff in Angstrom, validated by the caller
    """

    def __init__(self, i_points, j_points=None, cutoff: float = 8.0):
        self.directed = j_points is not None
        self.cell_size = cell_size_for(cutoff)
        self.boxes: Dict[GridCoord, Box] = {}

        self._bin(as_points(i_points), side="i")
        if self.directed:
            self._bin(as_points(j_points), side="j")

        logger.debug(
            f"Binned points into {len(self.boxes)} cells of {self.cell_size / SCALE:.2f}A"
        )

    def cell_of(self, point) -> GridCoord:
        """Grid coordinate of the cell containing a point."""
        floor = self._floors(as_points([point]))[0]
        return GridCoord(int(floor[0]), int(floor[1]), int(floor[2]))

    def _floors(self, points: np.ndarray) -> np.ndarray:
        size = self.cell_size
        return np.floor(points * SCALE / size).astype(np.int64) * size

    def _bin(self, points: np.ndarray, side: str) -> None:
        if len(points) == 0:
            return
        for index, (floor, coord) in enumerate(zip(self._floors(points), points)):
            key = GridCoord(int(floor[0]), int(floor[1]), int(floor[2]))
            box = self.boxes.get(key)
            if box is None:
                box = Box(key, shared=not self.directed)
                self.boxes[key] = box
            if side == "i":
                box.put_i_point(index, coord)
            else:
                box.put_j_point(index, coord)

    def neighbor_coords(self, floor: GridCoord) -> Iterator[GridCoord]:
        """Cells adjacent to ``floor`` that a search must visit from it.

        Directed searches visit all 26 neighbours; undirected ones only half of
        them since the other half visits this cell.
        """
        offsets = _ALL_OFFSETS if self.directed else _HALF_SHELL_OFFSETS
        size = self.cell_size
        for dx, dy, dz in offsets:
            yield floor.offset(dx * size, dy * size, dz * size)

    def iter_candidate_distances(self) -> Iterator[Tuple[int, int, float]]:
        """Distances for every point pair sharing a cell or in adjacent cells.

        Yields ``(i_index, j_index, distance)``. Each pair is produced once; for
        undirected searches ``i_index < j_index``.
        """
        for floor, box in self.boxes.items():
            yield from box.distances_within_box()
            for neighbor_floor in self.neighbor_coords(floor):
                neighbor = self.boxes.get(neighbor_floor)
                if neighbor is None:
                    continue
                for i, j, d in box.distances_to_neighbor(neighbor):
                    if not self.directed and i > j:
                        i, j = j, i
                    yield i, j, d

    def occupancy_histogram(self) -> Dict[int, int]:
        """Number of cells for each cell occupancy (points per cell)."""
        density: Dict[int, int] = {}
        for box in self.boxes.values():
            size = box.size()
            density[size] = density.get(size, 0) + 1
        return dict(sorted(density.items()))

    def __len__(self) -> int:
        return len(self.boxes)
