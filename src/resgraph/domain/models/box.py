#!/usr/bin/env python3
# src/resgraph/domain/models/box.py

"""
Grid cell used by the spatial index during contact detection.
"""

from typing import Dict, Iterator, NamedTuple, Tuple

import numpy as np

from ...utils.geometry import pairwise_distances


class GridCoord(NamedTuple):
    """Lower corner of a grid cell, in scaled integer units."""

    x: int
    y: int
    z: int

    def offset(self, dx: int, dy: int, dz: int) -> "GridCoord":
        return GridCoord(self.x + dx, self.y + dy, self.z + dz)


class Box:
    """A cubic grid cell holding the points binned into it.

    Points are split in an i bucket and a j bucket, keyed by the point's index
    in its side's coordinate list. For undirected contact types both buckets are
    the same dict.
    """

    def __init__(self, floor: GridCoord, shared: bool = False):
        self.floor = floor
        self.i_points: Dict[int, np.ndarray] = {}
        self.j_points: Dict[int, np.ndarray] = self.i_points if shared else {}

    @property
    def shared(self) -> bool:
        return self.i_points is self.j_points

    def put_i_point(self, index: int, coord: np.ndarray) -> None:
        self.i_points[index] = coord

    def put_j_point(self, index: int, coord: np.ndarray) -> None:
        self.j_points[index] = coord

    def size(self) -> int:
        """Number of distinct points in the cell."""
        if self.shared:
            return len(self.i_points)
        return len(self.i_points) + len(self.j_points)

    def distances_within_box(self) -> Iterator[Tuple[int, int, float]]:
        """Distances between this cell's i points and j points.

        With shared buckets only pairs with ``j > i`` are produced, so there are
        neither self pairs nor both orders of the same pair.
        """
        if not self.i_points or not self.j_points:
            return
        i_idx, i_xyz = _stack(self.i_points)
        if self.shared:
            dists = pairwise_distances(i_xyz, i_xyz)
            rows, cols = np.triu_indices(len(i_idx), k=1)
            # indices are in insertion order, which is ascending
            for r, c in zip(rows, cols):
                yield int(i_idx[r]), int(i_idx[c]), float(dists[r, c])
        else:
            j_idx, j_xyz = _stack(self.j_points)
            dists = pairwise_distances(i_xyz, j_xyz)
            for r in range(len(i_idx)):
                for c in range(len(j_idx)):
                    yield int(i_idx[r]), int(j_idx[c]), float(dists[r, c])

    def distances_to_neighbor(self, other: "Box") -> Iterator[Tuple[int, int, float]]:
        """Distances from this cell's i points to a neighbouring cell's j points."""
        if not self.i_points or not other.j_points:
            return
        i_idx, i_xyz = _stack(self.i_points)
        j_idx, j_xyz = _stack(other.j_points)
        dists = pairwise_distances(i_xyz, j_xyz)
        for r in range(len(i_idx)):
            for c in range(len(j_idx)):
                yield int(i_idx[r]), int(j_idx[c]), float(dists[r, c])

    def __repr__(self) -> str:
        return f"Box(floor={tuple(self.floor)}, size={self.size()})"


def _stack(points: Dict[int, np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
    indices = np.fromiter(points.keys(), dtype=np.int64, count=len(points))
    return indices, np.vstack(list(points.values()))
