#!/usr/bin/env python3
# src/resgraph/domain/models/contact_graph.py

"""
Domain model representing a residue interaction graph: the residue contacts
of a structure for a given contact type and distance cutoff.
"""

from typing import Dict, Mapping, Optional

import networkx as nx
import numpy as np

from ...config import is_directed
from .contact import Contact, ContactList


class ContactGraph:
    """Residue contact graph plus the residue and sequence metadata it came from."""

    def __init__(
        self,
        contacts: ContactList,
        nodes: Mapping[int, str],
        sequence: str = "",
        cutoff: float = 0.0,
        contact_type: str = "",
        pdb_code: str = "",
        chain_code: str = "",
        pdb_chain_code: str = "",
        directed: Optional[bool] = None,
    ):
        """
        Initialize a ContactGraph.

        Args:
            contacts: Residue contacts, taken over by the graph
            nodes: Residue serial to three letter residue type
            sequence: Full sequence including unobserved residues, "" if unknown
            cutoff: Distance cutoff used to compute the contacts
            contact_type: Contact type tag, e.g. "Ca", "ALL" or "BB/SC"
            pdb_code: Optional accession code of the source structure
            chain_code: Optional internal chain identifier
            pdb_chain_code: Optional author chain identifier
            directed: Overrides the directedness derived from contact_type,
                for graphs built without a contact type tag
        """
        self.contacts = contacts
        self.nodes: Dict[int, str] = {k: nodes[k] for k in sorted(nodes)}
        self.sequence = sequence or ""
        self.cutoff = cutoff
        self.contact_type = contact_type
        self.pdb_code = pdb_code
        self.chain_code = chain_code
        self.pdb_chain_code = pdb_chain_code
        self.directed = is_directed(contact_type) if directed is None else directed
        self.num_contacts = len(contacts)
        self.modified = False

        if self.sequence:
            self.full_length = len(self.sequence)
        elif self.nodes:
            # unobserved residues at the end of the chain can't be known without a sequence
            self.full_length = max(self.nodes)
        else:
            self.full_length = contacts.max_node()
        self.obs_length = len(self.nodes) if self.nodes else self.full_length

    def _as_own_kind(self, contact: Contact) -> Contact:
        # a contact always takes the directedness of the graph holding it
        if contact.directed == self.directed:
            return contact
        return Contact(contact.i, contact.j, directed=self.directed)

    def add_edge(self, contact: Contact) -> None:
        """Add a contact to the graph, if not already present."""
        if self.contacts.add(self._as_own_kind(contact)):
            self.num_contacts = len(self.contacts)
            self.modified = True

    def del_edge(self, contact: Contact) -> None:
        """Remove a contact from the graph, if present."""
        if self.contacts.discard(self._as_own_kind(contact)):
            self.num_contacts = len(self.contacts)
            self.modified = True

    def restrict_to_max_range(self, max_range: int) -> None:
        """Remove contacts whose sequence separation is greater than ``max_range``."""
        to_delete = [c for c in self.contacts if c.range > max_range]
        for contact in to_delete:
            self.del_edge(contact)

    def restrict_to_min_range(self, min_range: int) -> None:
        """Remove contacts whose sequence separation is smaller than ``min_range``."""
        to_delete = [c for c in self.contacts if c.range < min_range]
        for contact in to_delete:
            self.del_edge(contact)

    def get_contacts(self) -> ContactList:
        """Deep copy of the contacts."""
        return self.contacts.copy()

    def get_nodes(self) -> Dict[int, str]:
        """Copy of the residue serial to residue type map."""
        return dict(self.nodes)

    def copy(self) -> "ContactGraph":
        """Deep copy of this graph, independent of the original."""
        new = ContactGraph(
            self.get_contacts(),
            self.get_nodes(),
            self.sequence,
            self.cutoff,
            self.contact_type,
            self.pdb_code,
            self.chain_code,
            self.pdb_chain_code,
            self.directed,
        )
        new.full_length = self.full_length
        new.obs_length = self.obs_length
        new.modified = self.modified
        return new

    def get_res_type(self, resser: int) -> Optional[str]:
        return self.nodes.get(resser)

    def node_neighborhood(self, resser: int) -> Dict[int, Optional[str]]:
        """Residues in contact with ``resser``, in either direction.

        Returns:
            Ordered mapping of neighbour residue serial to residue type
        """
        nbh = {}
        for contact in self.contacts:
            if contact.i == resser:
                nbh[contact.j] = self.nodes.get(contact.j)
            elif contact.j == resser:
                nbh[contact.i] = self.nodes.get(contact.i)
        return dict(sorted(nbh.items()))

    def edge_neighborhood(self, i_resser: int, j_resser: int) -> Dict[int, Optional[str]]:
        """Common neighbours of two residues."""
        i_nbh = self.node_neighborhood(i_resser)
        j_nbh = self.node_neighborhood(j_resser)
        small, large = (i_nbh, j_nbh) if len(i_nbh) <= len(j_nbh) else (j_nbh, i_nbh)
        return {resser: restype for resser, restype in small.items() if resser in large}

    def get_int_matrix(self) -> np.ndarray:
        """Contact map as a ``full_length x full_length`` matrix of 0s and 1s.

        Residue serial ``k`` maps to row/column ``k - 1``. Undirected graphs give a
        symmetric matrix.

        Raises:
            ValueError: If a contact involves a residue serial below 1, as
                with unrenumbered author residue numbers
        """
        low = min((min(c.i, c.j) for c in self.contacts), default=1)
        if low < 1:
            raise ValueError(
                f"Contact map needs residue serials >= 1, got {low}; renumber the residues"
            )
        size = max(self.full_length, self.contacts.max_node())
        cm = np.zeros((size, size), dtype=int)
        for contact in self.contacts:
            cm[contact.i - 1, contact.j - 1] = 1
            if not self.directed:
                cm[contact.j - 1, contact.i - 1] = 1
        return cm

    def to_networkx(self) -> nx.Graph:
        """Build a NetworkX graph with residues as nodes and contacts as edges."""
        G = nx.DiGraph() if self.directed else nx.Graph()
        G.graph.update(
            contact_type=self.contact_type,
            cutoff=self.cutoff,
            sequence=self.sequence,
            pdb_code=self.pdb_code,
            chain_code=self.chain_code,
        )
        for resser, restype in self.nodes.items():
            G.add_node(resser, residue_type=restype)
        for contact in self.contacts:
            G.add_edge(contact.i, contact.j, range=contact.range)
        return G

    def __len__(self) -> int:
        return self.num_contacts

    def __contains__(self, contact: object) -> bool:
        return contact in self.contacts

    def __repr__(self) -> str:
        return (
            f"ContactGraph(ct={self.contact_type!r}, cutoff={self.cutoff}, "
            f"nodes={self.obs_length}, contacts={self.num_contacts})"
        )
