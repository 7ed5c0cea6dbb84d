"""Numeric helpers shared by the grid search and the superimposer."""

from typing import Iterable, Mapping, Sequence, Tuple

import numpy as np


def as_points(points) -> np.ndarray:
    """Convert a point sequence to a float64 ``(n, 3)`` array copy.

    Accepts numpy arrays, lists of triples or an empty sequence.
    """
    array = np.array(points, dtype=np.float64, copy=True)
    if array.size == 0:
        return array.reshape(0, 3)
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError(f"Expected an (n, 3) array of points, got shape {array.shape}")
    return array


def coords_to_array(coords: Mapping[int, Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split an ordered serial -> coordinate map into serials and a point array."""
    serials = np.fromiter(coords.keys(), dtype=np.int64, count=len(coords))
    return serials, as_points(list(coords.values()))


def centroid(points: np.ndarray) -> np.ndarray:
    """Mean position of a set of points."""
    return points.mean(axis=0)


def pairwise_distances(points1: np.ndarray, points2: np.ndarray) -> np.ndarray:
    """Full ``(n1, n2)`` distance matrix between two point sets."""
    diff = points1[:, np.newaxis, :] - points2[np.newaxis, :, :]
    return np.sqrt((diff**2).sum(axis=2))


def rotation_matrix(axis: Iterable[float], angle: float) -> np.ndarray:
    """Rotation matrix for a right-handed rotation of ``angle`` radians.

    The matrix acts on column vectors (``R @ v``); for row-stacked points use
    ``points @ R.T``.
    """
    axis = np.asarray(list(axis), dtype=np.float64)
    axis = axis / np.linalg.norm(axis)
    x, y, z = axis
    c, s = np.cos(angle), np.sin(angle)
    C = 1.0 - c
    return np.array(
        [
            [c + x * x * C, x * y * C - z * s, x * z * C + y * s],
            [y * x * C + z * s, c + y * y * C, y * z * C - x * s],
            [z * x * C - y * s, z * y * C + x * s, c + z * z * C],
        ]
    )


def apply_rigid_transform(
    points: np.ndarray, rotation: np.ndarray, translation: Sequence[float]
) -> np.ndarray:
    """Rotate row-stacked points with ``points @ rotation`` then translate."""
    return as_points(points) @ rotation + np.asarray(translation, dtype=np.float64)


def rmsd_of(points1: np.ndarray, points2: np.ndarray) -> float:
    """Plain RMSD of two matched point sets, with no superposition."""
    diff = as_points(points1) - as_points(points2)
    if len(diff) == 0:
        return 0.0
    return float(np.sqrt((diff**2).sum(axis=1).mean()))
