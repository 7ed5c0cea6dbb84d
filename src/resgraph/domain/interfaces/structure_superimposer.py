"""Interface for structure superposition strategies."""

from abc import ABC, abstractmethod

from ..models.alignment_result import AlignmentResult


class StructureSuperimposer(ABC):
    """Abstract base class for rigid superposition of matched point sets."""

    @abstractmethod
    def align(self, coords1, coords2) -> AlignmentResult:
        """
        Superpose the second point set onto the first.

        Args:
            coords1: Reference points, shape (n, 3)
            coords2: Points to move, shape (n, 3), matched to coords1 by index

        Returns:
            AlignmentResult containing the RMSD and the transformation
        """
        pass
