"""Service building residue contact graphs from atom coordinates."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..config import DetectionSettings, is_directed, validate_cutoff
from ..domain.implementations.grid_contact_detector import (
    GridContactDetector,
    split_contact_type,
)
from ..domain.interfaces.coordinate_source import CoordinateSource
from ..domain.models.atom import Atom
from ..domain.models.contact import AtomContact
from ..domain.models.contact_graph import ContactGraph
from ..utils.benchmarking import Timer
from ..utils.geometry import coords_to_array, pairwise_distances


class ContactService:
    """Service for computing contact graphs and related distance data."""

    def __init__(
        self,
        detector: Optional[GridContactDetector] = None,
        settings: Optional[DetectionSettings] = None,
    ):
        """Initialize service with a detector and default settings."""
        self._detector = detector or GridContactDetector()
        self.settings = (settings or DetectionSettings()).validate()
        self.logger = logging.getLogger(__name__)

    def build_contact_graph(
        self,
        coordinates_by_side: Sequence[Sequence[Atom]],
        cutoff: float,
        directed: bool,
        residue_types: Mapping[int, str],
        sequence: str = "",
        contact_type: str = "",
    ) -> ContactGraph:
        """
        Build a contact graph from atoms already resolved to a contact type.

        Args:
            coordinates_by_side: One atom collection for undirected contact
                types, or the (i side, j side) pair for directed ones
            cutoff: Distance cutoff in Angstrom
            directed: Whether contacts are directed (i side -> j side)
            residue_types: Residue serial to three letter residue type
            sequence: Full sequence, "" if unknown
            contact_type: Contact type tag stored in the graph

        Returns:
            ContactGraph with the residue contacts

        Raises:
            InvalidCutoffError: If cutoff is not > 0
            ValueError: If the number of sides doesn't match ``directed``
        """
        cutoff = validate_cutoff(cutoff)
        expected_sides = 2 if directed else 1
        if len(coordinates_by_side) != expected_sides:
            raise ValueError(
                f"Expected {expected_sides} atom collection(s) for a "
                f"{'directed' if directed else 'undirected'} contact type, "
                f"got {len(coordinates_by_side)}"
            )
        if contact_type and is_directed(contact_type) != directed:
            raise ValueError(
                f"Contact type {contact_type!r} doesn't match directed={directed}"
            )

        atom_to_residue: Dict[int, int] = {}
        sides: List[Dict[int, Tuple[float, float, float]]] = []
        for atoms in coordinates_by_side:
            side = {}
            for atom in sorted(atoms, key=lambda a: a.serial):
                side[atom.serial] = atom.coordinates
                atom_to_residue[atom.serial] = atom.residue_serial
            sides.append(side)

        with Timer("contact detection", self.logger):
            atom_pairs = self._detector.atom_contacts(
                sides[0], sides[1] if directed else None, cutoff
            )
        contacts = self._detector.residue_contacts(
            atom_pairs, atom_to_residue, directed=directed
        )
        return ContactGraph(
            contacts,
            residue_types,
            sequence,
            cutoff,
            contact_type,
            directed=directed,
        )

    def detect(
        self,
        source: CoordinateSource,
        contact_type: Optional[str] = None,
        cutoff: Optional[float] = None,
    ) -> ContactGraph:
        """
        Build the contact graph of a structure view.

        Args:
            source: Structure view resolving contact types to atoms
            contact_type: Contact type tag, defaults to the service settings
            cutoff: Distance cutoff, defaults to the service settings

        Returns:
            ContactGraph for the contact type and cutoff
        """
        contact_type = contact_type or self.settings.contact_type
        cutoff = self.settings.cutoff if cutoff is None else cutoff
        with Timer(f"contact graph {contact_type}", self.logger):
            return self._detector.detect(source, contact_type, cutoff)

    def interface_contacts(
        self,
        source_a: CoordinateSource,
        source_b: CoordinateSource,
        contact_type: Optional[str] = None,
        cutoff: Optional[float] = None,
    ) -> List[AtomContact]:
        """Atom contacts between two chains within the cutoff."""
        contact_type = contact_type or self.settings.contact_type
        cutoff = self.settings.cutoff if cutoff is None else cutoff
        contacts = self._detector.interface_contacts(
            source_a, source_b, contact_type, cutoff
        )
        self.logger.info(f"Found {len(contacts)} interface atom contacts")
        return contacts

    def distance_matrix(
        self, source: CoordinateSource, contact_type: str
    ) -> Dict[Tuple[int, int], float]:
        """
        All residue pair distances, computed without the grid.

        Meant for single atom contact types. For multi atom types the shortest
        atom distance of each residue pair is kept.

        Args:
            source: Structure view
            contact_type: Contact type tag, "X/Y" for directed distances

        Returns:
            (i residue serial, j residue serial) to distance
        """
        i_ct, j_ct = split_contact_type(contact_type)
        i_serials, i_points = coords_to_array(source.get_coords_for_ct(i_ct))
        if j_ct is None:
            j_serials, j_points = i_serials, i_points
        else:
            j_serials, j_points = coords_to_array(source.get_coords_for_ct(j_ct))

        distances: Dict[Tuple[int, int], float] = {}
        if len(i_serials) == 0 or len(j_serials) == 0:
            return distances

        matrix = pairwise_distances(i_points, j_points)
        rows, cols = (
            np.triu_indices(len(i_serials), k=1)
            if j_ct is None
            else np.indices(matrix.shape).reshape(2, -1)
        )
        for r, c in zip(rows, cols):
            i_resser = source.get_resser_from_atomser(int(i_serials[r]))
            j_resser = source.get_resser_from_atomser(int(j_serials[c]))
            if i_resser == j_resser:
                continue
            key = (i_resser, j_resser)
            if j_ct is None and i_resser > j_resser:
                key = (j_resser, i_resser)
            dist = float(matrix[r, c])
            if key not in distances or dist < distances[key]:
                distances[key] = dist
        return dict(sorted(distances.items()))


def build_contact_graph(
    coordinates_by_side: Sequence[Sequence[Atom]],
    cutoff: float,
    directed: bool,
    residue_types: Mapping[int, str],
    sequence: str = "",
    contact_type: str = "",
) -> ContactGraph:
    """Build a contact graph with a default ContactService."""
    return ContactService().build_contact_graph(
        coordinates_by_side,
        cutoff,
        directed,
        residue_types,
        sequence,
        contact_type,
    )
