"""Domain model for structure superposition results."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple

import numpy as np


@dataclass
class AlignmentResult:
    """Contains results from an optimal rigid superposition.

    ``aligned_coordinates`` is the second point set moved onto the first:
    ``coords2 @ rotation + translation``.
    """

    rmsd: float
    matched_atoms: int
    rotation: np.ndarray
    translation: np.ndarray
    aligned_coordinates: np.ndarray
    matched_pairs: List[Tuple[Any, Any]] = field(default_factory=list)
    is_reflection: bool = False

    @property
    def transformation_matrix(self) -> Tuple[np.ndarray, np.ndarray]:
        return (self.rotation, self.translation)

    def __iter__(self) -> Iterator[Any]:
        """Allow ``rmsd, aligned = result`` unpacking."""
        yield self.rmsd
        yield self.aligned_coordinates
