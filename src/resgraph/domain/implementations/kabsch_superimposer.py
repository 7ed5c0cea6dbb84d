"""Implementation of structure superposition with the Kabsch algorithm."""

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from ...errors import SizeMismatchError
from ...utils.geometry import as_points, centroid
from ..interfaces.structure_superimposer import StructureSuperimposer
from ..models.alignment_result import AlignmentResult


class KabschSuperimposer(StructureSuperimposer):
    """Superpose matched point sets by least-squares rotation (Kabsch/SVD).

    The RMSD comes from the singular values of the cross-covariance matrix, so
    no iteration is involved.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def align(
        self,
        coords1,
        coords2,
        matched_pairs: Optional[List[Tuple[Any, Any]]] = None,
    ) -> AlignmentResult:
        """
        Superpose coords2 onto coords1.

        Args:
            coords1: Reference points, shape (n, 3)
            coords2: Points to move, shape (n, 3), point k matching coords1[k]
            matched_pairs: Optional keys of the matched points, kept in the result

        Returns:
            AlignmentResult with the minimal RMSD and coords2 superposed on coords1

        Raises:
            SizeMismatchError: If the point sets have different lengths
            ValueError: If the point sets are empty
        """
        # as_points copies, the caller's arrays are never modified
        conf1 = as_points(coords1)
        conf2 = as_points(coords2)
        if len(conf1) != len(conf2):
            raise SizeMismatchError(len(conf1), len(conf2))
        n_vec = len(conf1)
        if n_vec == 0:
            raise ValueError("Can't superpose empty point sets")

        center1 = centroid(conf1)
        center2 = centroid(conf2)
        conf1 -= center1
        conf2 -= center2

        # E0: initial sum of squared lengths of both conformations
        E0 = float((conf1**2).sum() + (conf2**2).sum())

        correlation_matrix = conf2.T @ conf1
        U, singular_values, Vt = np.linalg.svd(correlation_matrix)

        is_reflection = np.linalg.det(U) * np.linalg.det(Vt) < 0.0
        if is_reflection:
            # numpy sorts singular values descending, the last one is the smallest
            singular_values[-1] = -singular_values[-1]
            U[:, -1] = -U[:, -1]

        rmsd_sq = (E0 - 2.0 * float(singular_values.sum())) / n_vec
        rmsd = float(np.sqrt(max(rmsd_sq, 0.0)))

        rotation = U @ Vt
        translation = center1 - center2 @ rotation
        aligned = conf2 @ rotation + center1

        self.logger.debug(
            f"Superposed {n_vec} points: RMSD {rmsd:.4f}"
            + (" (reflection corrected)" if is_reflection else "")
        )

        return AlignmentResult(
            rmsd=rmsd,
            matched_atoms=n_vec,
            rotation=rotation,
            translation=translation,
            aligned_coordinates=aligned,
            matched_pairs=list(matched_pairs) if matched_pairs is not None else [],
            is_reflection=bool(is_reflection),
        )
