"""Adapter turning Bio.PDB chains into AtomTable structure views."""

import logging
from typing import Dict, List, Tuple

from Bio.PDB.Chain import Chain

from ...domain.models.atom import Atom
from ...domain.models.atom_table import AtomTable, ContactTypeTable

logger = logging.getLogger(__name__)


class BiopythonAdapter:
    """Builds the core's read-only atom view from an already parsed Bio.PDB chain.

    Hetero residues (ligands, waters) are skipped. Residues are renumbered
    from 1 in chain order unless ``renumber`` is False, in which case the
    author residue numbers are used and insertion codes are rejected.
    """

    def __init__(self, contact_types: ContactTypeTable, renumber: bool = True):
        self.contact_types = contact_types
        self.renumber = renumber
        # internal residue serial -> (author residue number, insertion code)
        self.pdb_residue_ids: Dict[int, Tuple[int, str]] = {}

    def to_atom_table(self, chain: Chain, sequence: str = "") -> AtomTable:
        """
        Convert a Bio.PDB chain to an AtomTable.

        Args:
            chain: Parsed Bio.PDB chain
            sequence: Full sequence of the chain, "" if unknown

        Returns:
            AtomTable over the chain's standard residues
        """
        atoms: List[Atom] = []
        residue_types: Dict[int, str] = {}
        self.pdb_residue_ids = {}
        next_serial = 1

        for residue in chain:
            hetflag, resseq, icode = residue.get_id()
            if hetflag.strip():
                continue
            if self.renumber:
                resser = len(residue_types) + 1
            else:
                if icode.strip():
                    raise ValueError(
                        f"Residue {resseq}{icode} has an insertion code, "
                        "use renumber=True"
                    )
                resser = resseq
            residue_types[resser] = residue.get_resname()
            self.pdb_residue_ids[resser] = (resseq, icode.strip())

            for bio_atom in residue:
                serial = bio_atom.get_serial_number()
                if serial is None:
                    serial = next_serial
                next_serial = max(next_serial, serial) + 1
                atoms.append(
                    Atom(
                        serial=serial,
                        residue_serial=resser,
                        coordinates=tuple(bio_atom.get_coord()),
                        atom_name=bio_atom.get_name(),
                        residue_name=residue.get_resname(),
                        chain_id=chain.id,
                    )
                )

        logger.info(
            f"Chain {chain.id}: {len(residue_types)} residues, {len(atoms)} atoms"
        )
        return AtomTable(atoms, residue_types, self.contact_types, sequence)


def atom_table_from_chain(
    chain: Chain,
    contact_types: ContactTypeTable,
    sequence: str = "",
    renumber: bool = True,
) -> AtomTable:
    """Build an AtomTable from a Bio.PDB chain."""
    return BiopythonAdapter(contact_types, renumber).to_atom_table(chain, sequence)
