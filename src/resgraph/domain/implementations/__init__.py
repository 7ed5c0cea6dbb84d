"""Algorithms: grid contact search and Kabsch superposition."""

from .spatial_index import SpatialIndex, cell_size_for
from .grid_contact_detector import GridContactDetector, split_contact_type
from .kabsch_superimposer import KabschSuperimposer

__all__ = [
    "SpatialIndex",
    "cell_size_for",
    "GridContactDetector",
    "split_contact_type",
    "KabschSuperimposer",
]
