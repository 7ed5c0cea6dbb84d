"""Numeric and timing helpers."""

from .geometry import (
    as_points,
    centroid,
    pairwise_distances,
    rotation_matrix,
    apply_rigid_transform,
    rmsd_of,
)
from .benchmarking import Timer, TimingStats

__all__ = [
    "as_points",
    "centroid",
    "pairwise_distances",
    "rotation_matrix",
    "apply_rigid_transform",
    "rmsd_of",
    "Timer",
    "TimingStats",
]
