"""Interfaces the core depends on."""

from .coordinate_source import CoordinateSource
from .structure_superimposer import StructureSuperimposer

__all__ = ["CoordinateSource", "StructureSuperimposer"]
