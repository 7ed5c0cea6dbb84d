#!/usr/bin/env python3
# src/resgraph/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Read-only view of an atom as seen by the contact and superposition core."""

    serial: int
    residue_serial: int
    coordinates: Tuple[float, float, float]
    atom_name: str = ""
    residue_name: str = ""
    chain_id: str = "A"

    def __post_init__(self):
        """Normalise coordinates to a float triple."""
        x, y, z = self.coordinates
        object.__setattr__(self, "coordinates", (float(x), float(y), float(z)))

    @property
    def key(self) -> Tuple[int, str]:
        """Residue serial + atom name, used to match atoms across conformations."""
        return (self.residue_serial, self.atom_name)
