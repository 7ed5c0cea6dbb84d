"""Service for rigid superposition of conformations."""

import logging
from typing import Optional

import numpy as np

from ..config import is_directed
from ..domain.implementations.kabsch_superimposer import KabschSuperimposer
from ..domain.interfaces.coordinate_source import CoordinateSource
from ..domain.interfaces.structure_superimposer import StructureSuperimposer
from ..domain.models.alignment_result import AlignmentResult
from ..utils.benchmarking import Timer


class AlignmentService:
    """Service for superposing conformations and measuring their RMSD."""

    def __init__(self, superimposer: Optional[StructureSuperimposer] = None):
        """Initialize service with superposition strategy."""
        self._superimposer = superimposer or KabschSuperimposer()
        self.logger = logging.getLogger(__name__)

    def align(self, points_a, points_b) -> AlignmentResult:
        """
        Superpose points_b onto points_a.

        Args:
            points_a: Reference points, shape (n, 3)
            points_b: Points matched to points_a by index, shape (n, 3)

        Returns:
            AlignmentResult with the RMSD and points_b superposed on points_a

        Raises:
            SizeMismatchError: If the point sets have different lengths
        """
        with Timer("superposition", self.logger):
            return self._superimposer.align(points_a, points_b)

    def align_structures(
        self,
        reference: CoordinateSource,
        target: CoordinateSource,
        contact_type: str = "Ca",
    ) -> AlignmentResult:
        """
        Superpose two conformations of the same chain.

        Atoms are matched by residue serial and atom name; atoms or residues
        present in only one of the structures are left out.

        Args:
            reference: Reference conformation
            target: Conformation to superpose onto the reference
            contact_type: Atoms to superpose, e.g. "Ca" or "BB"

        Returns:
            AlignmentResult whose matched_pairs are the (residue serial,
            atom name) keys used
        """
        if is_directed(contact_type):
            raise ValueError(
                f"Directed contact type {contact_type!r} can't be used for superposition"
            )
        ref_coords = reference.get_coords_for_ct_by_key(contact_type)
        target_coords = target.get_coords_for_ct_by_key(contact_type)

        common = [key for key in ref_coords if key in target_coords]
        if len(common) < len(ref_coords) or len(common) < len(target_coords):
            self.logger.info(
                f"Superposing on {len(common)} common atoms "
                f"({len(ref_coords)} in reference, {len(target_coords)} in target)"
            )

        coords1 = np.array([ref_coords[key] for key in common]).reshape(-1, 3)
        coords2 = np.array([target_coords[key] for key in common]).reshape(-1, 3)
        result = self.align(coords1, coords2)
        result.matched_pairs = [(key, key) for key in common]
        return result

    def rmsd(
        self,
        reference: CoordinateSource,
        target: CoordinateSource,
        contact_type: str = "Ca",
    ) -> float:
        """RMSD after optimal superposition of two conformations."""
        return self.align_structures(reference, target, contact_type).rmsd


def align(points_a, points_b) -> AlignmentResult:
    """Superpose points_b onto points_a with the Kabsch algorithm."""
    return AlignmentService().align(points_a, points_b)
