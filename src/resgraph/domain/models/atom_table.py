#!/usr/bin/env python3
# src/resgraph/domain/models/atom_table.py

"""
In-memory CoordinateSource built from a list of atoms and a contact type table.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ...errors import UnknownContactTypeError
from ..interfaces.coordinate_source import CoordinateSource
from .atom import Atom

logger = logging.getLogger(__name__)

# Residue type key matching any residue type not listed explicitly
ANY_RESIDUE = "*"

# C-terminal residues may carry OXT where the other residues have O
TERMINAL_OXYGEN_FALLBACK = {"O": "OXT"}

ContactTypeTable = Mapping[str, Mapping[str, Sequence[str]]]


class AtomTable(CoordinateSource):
    """Atoms of one chain, indexed for contact type resolution.

    The contact type table maps a contact type tag to a mapping of residue type
    to the atom names representing that residue, e.g.::

        {"Ca": {"*": ["CA"]}, "BB": {"*": ["N", "CA", "C", "O"]}}

    Building that table is up to the caller.
    """

    def __init__(
        self,
        atoms: Iterable[Atom],
        residue_types: Mapping[int, str],
        contact_types: ContactTypeTable,
        sequence: str = "",
    ):
        self._residue_types: Dict[int, str] = {
            k: residue_types[k] for k in sorted(residue_types)
        }
        self._contact_types = contact_types
        self._sequence = sequence or ""
        self._atoms: Dict[int, Atom] = {}
        self._by_key: Dict[Tuple[int, str], int] = {}

        for atom in atoms:
            if atom.serial in self._atoms:
                raise ValueError(f"Duplicate atom serial {atom.serial}")
            self._atoms[atom.serial] = atom
            self._by_key[atom.key] = atom.serial

    @property
    def sequence(self) -> str:
        return self._sequence

    @property
    def atoms(self) -> List[Atom]:
        return [self._atoms[s] for s in sorted(self._atoms)]

    def __len__(self) -> int:
        return len(self._atoms)

    def residue_types(self) -> Dict[int, str]:
        return dict(self._residue_types)

    def get_resser_from_atomser(self, atom_serial: int) -> int:
        return self._atoms[atom_serial].residue_serial

    def atom_names_for(self, contact_type: str, residue_type: str) -> Optional[Sequence[str]]:
        """Atom names representing a residue type in a contact type, None if not covered."""
        if contact_type not in self._contact_types:
            raise UnknownContactTypeError(contact_type)
        per_residue = self._contact_types[contact_type]
        if residue_type in per_residue:
            return per_residue[residue_type]
        return per_residue.get(ANY_RESIDUE)

    def _resolve(self, contact_type: str, warn: bool) -> List[Tuple[int, str, int]]:
        """(residue serial, atom name, atom serial) for the atoms of a contact type."""
        resolved = []
        for resser, restype in self._residue_types.items():
            names = self.atom_names_for(contact_type, restype)
            if names is None:
                if warn:
                    logger.warning(
                        f"No {contact_type} atoms defined for residue type {restype} "
                        f"(resser={resser}). Skipping residue."
                    )
                continue
            for name in names:
                serial = self._by_key.get((resser, name))
                if serial is None and name in TERMINAL_OXYGEN_FALLBACK:
                    serial = self._by_key.get((resser, TERMINAL_OXYGEN_FALLBACK[name]))
                if serial is None:
                    if warn:
                        logger.warning(
                            f"Couldn't find {name} atom for resser={resser}. "
                            "Continuing without that atom for this resser."
                        )
                    continue
                resolved.append((resser, name, serial))
        return resolved

    def get_coords_for_ct(self, contact_type: str) -> Dict[int, np.ndarray]:
        coords = {
            serial: np.asarray(self._atoms[serial].coordinates, dtype=np.float64)
            for _, _, serial in self._resolve(contact_type, warn=True)
        }
        return dict(sorted(coords.items()))

    def get_coords_for_ct_by_key(
        self, contact_type: str
    ) -> Dict[Tuple[int, str], np.ndarray]:
        coords = {
            (resser, name): np.asarray(self._atoms[serial].coordinates, dtype=np.float64)
            for resser, name, serial in self._resolve(contact_type, warn=False)
        }
        return dict(sorted(coords.items()))
