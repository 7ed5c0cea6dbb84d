"""Read-only structure view consumed by contact detection and RMSD matching."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple

import numpy as np


class CoordinateSource(ABC):
    """Narrow interface to a single chain's atoms.

    Implementations resolve a contact type (e.g. "Ca", "BB", "SC") to the atoms
    that represent each residue. Directed contact types ("BB/SC") are split by
    the caller and each side resolved separately.
    """

    @property
    @abstractmethod
    def sequence(self) -> str:
        """Full sequence, or "" if unknown."""
        pass

    @abstractmethod
    def residue_types(self) -> Dict[int, str]:
        """Residue serial to three letter residue type, ordered by serial."""
        pass

    @abstractmethod
    def get_coords_for_ct(self, contact_type: str) -> Dict[int, np.ndarray]:
        """Atom serial to coordinate for the atoms of a contact type, ordered by serial."""
        pass

    @abstractmethod
    def get_coords_for_ct_by_key(
        self, contact_type: str
    ) -> Dict[Tuple[int, str], np.ndarray]:
        """(residue serial, atom name) to coordinate, ordered by key."""
        pass

    @abstractmethod
    def get_resser_from_atomser(self, atom_serial: int) -> int:
        """Residue serial owning an atom."""
        pass
