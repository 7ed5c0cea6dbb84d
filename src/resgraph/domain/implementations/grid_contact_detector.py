"""Contact detection by geometric hashing of atom coordinates into a grid."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ...config import DIRECTED_SEPARATOR, is_directed, validate_cutoff
from ...utils.geometry import coords_to_array
from ..interfaces.coordinate_source import CoordinateSource
from ..models.contact import AtomContact, Contact, ContactList
from ..models.contact_graph import ContactGraph
from .spatial_index import SpatialIndex

AtomPairDistances = Dict[Tuple[int, int], float]


def split_contact_type(contact_type: str) -> Tuple[str, Optional[str]]:
    """Split a contact type tag into its i and j sides ("BB/SC" -> ("BB", "SC"))."""
    if not is_directed(contact_type):
        return contact_type, None
    i_ct, j_ct = contact_type.split(DIRECTED_SEPARATOR, 1)
    return i_ct, j_ct


class GridContactDetector:
    """Finds all atom pairs within a cutoff without a full distance matrix.

    Atoms are binned in a SpatialIndex; only pairs in the same or in adjacent
    cells are evaluated.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def atom_contacts(
        self,
        i_coords: Mapping[int, Sequence[float]],
        j_coords: Optional[Mapping[int, Sequence[float]]],
        cutoff: float,
        same_structure: bool = True,
    ) -> AtomPairDistances:
        """
        Atom pairs within ``cutoff`` of each other.

        Args:
            i_coords: Atom serial to coordinate for the first side
            j_coords: Atom serial to coordinate for the second side, None for
                undirected contacts between the atoms of ``i_coords``
            cutoff: Distance cutoff in Angstrom
            same_structure: Both sides index the same atoms, so a serial present
                on both sides is one atom and never a contact

        Returns:
            (i atom serial, j atom serial) to distance. Undirected pairs appear
            once, with the lower serial first.

        Raises:
            InvalidCutoffError: If cutoff is not > 0
        """
        cutoff = validate_cutoff(cutoff)
        directed = j_coords is not None

        i_serials, i_points = coords_to_array(i_coords)
        if directed:
            j_serials, j_points = coords_to_array(j_coords)
        else:
            j_serials, j_points = i_serials, None

        if len(i_serials) == 0 or len(j_serials) == 0:
            return {}

        index = SpatialIndex(i_points, j_points, cutoff)

        pairs: AtomPairDistances = {}
        for i, j, dist in index.iter_candidate_distances():
            if dist > cutoff:
                continue
            i_ser = int(i_serials[i])
            j_ser = int(j_serials[j])
            if directed:
                if same_structure and i_ser == j_ser:
                    continue
            elif i_ser > j_ser:
                i_ser, j_ser = j_ser, i_ser
            pairs[(i_ser, j_ser)] = dist

        self.logger.debug(
            f"{len(pairs)} atom pairs within {cutoff}A "
            f"({len(i_serials)} x {len(j_serials)} atoms, {len(index)} cells)"
        )
        return pairs

    @staticmethod
    def residue_contacts(
        atom_pairs: Mapping[Tuple[int, int], float],
        atom_to_residue: Mapping[int, int],
        directed: bool = False,
    ) -> ContactList:
        """Project atom pairs to residue pairs, dropping pairs within one residue."""
        contacts = ContactList()
        for i_atom, j_atom in atom_pairs:
            i_resser = atom_to_residue[i_atom]
            j_resser = atom_to_residue[j_atom]
            if i_resser != j_resser:
                contacts.add(Contact(i_resser, j_resser, directed=directed))
        return contacts

    def detect(
        self, source: CoordinateSource, contact_type: str, cutoff: float
    ) -> ContactGraph:
        """
        Build the residue contact graph of a structure.

        Args:
            source: Structure view resolving contact types to atoms
            contact_type: Contact type tag; "X/Y" gives a directed graph
            cutoff: Distance cutoff in Angstrom

        Returns:
            ContactGraph for the given contact type and cutoff
        """
        cutoff = validate_cutoff(cutoff)
        i_ct, j_ct = split_contact_type(contact_type)
        i_coords = source.get_coords_for_ct(i_ct)
        j_coords = source.get_coords_for_ct(j_ct) if j_ct is not None else None

        atom_pairs = self.atom_contacts(i_coords, j_coords, cutoff)
        atom_to_residue = {
            serial: source.get_resser_from_atomser(serial)
            for serial in set(i_coords) | set(j_coords or {})
        }
        contacts = self.residue_contacts(
            atom_pairs, atom_to_residue, directed=j_ct is not None
        )

        graph = ContactGraph(
            contacts,
            source.residue_types(),
            source.sequence,
            cutoff,
            contact_type,
        )
        self.logger.info(
            f"Contact graph {contact_type} {cutoff}A: "
            f"{graph.obs_length} residues, {graph.num_contacts} contacts"
        )
        return graph

    def interface_contacts(
        self,
        source_a: CoordinateSource,
        source_b: CoordinateSource,
        contact_type: str,
        cutoff: float,
    ) -> List[AtomContact]:
        """
        Atom contacts between two chains.

        Args:
            source_a: First chain
            source_b: Second chain
            contact_type: Atoms considered on both chains; "X/Y" uses X on the
                first chain and Y on the second
            cutoff: Distance cutoff in Angstrom

        Returns:
            AtomContact list sorted by atom serials
        """
        a_ct, b_ct = split_contact_type(contact_type)
        a_coords = source_a.get_coords_for_ct(a_ct)
        b_coords = source_b.get_coords_for_ct(b_ct if b_ct is not None else a_ct)

        # serials of different chains may clash, so search on positional keys
        a_keys = list(a_coords)
        b_keys = list(b_coords)
        pairs = self.atom_contacts(
            dict(enumerate(a_coords.values())),
            dict(enumerate(b_coords.values())),
            cutoff,
            same_structure=False,
        )

        contacts = [
            AtomContact(
                a_keys[i],
                b_keys[j],
                dist,
                source_a.get_resser_from_atomser(a_keys[i]),
                source_b.get_resser_from_atomser(b_keys[j]),
            )
            for (i, j), dist in pairs.items()
        ]
        return sorted(contacts)
