import numpy as np
import pytest

from resgraph.domain.models.atom import Atom
from resgraph.domain.models.atom_table import AtomTable

CONTACT_TYPES = {
    "Ca": {"*": ["CA"]},
    "Cb": {"*": ["CB"], "GLY": ["CA"]},
    "BB": {"*": ["N", "CA", "C", "O"]},
    "SC": {"ALA": ["CB"], "SER": ["CB", "OG"], "LEU": ["CB", "CG", "CD1", "CD2"]},
    "ALL": {
        "ALA": ["N", "CA", "C", "O", "CB"],
        "GLY": ["N", "CA", "C", "O"],
        "SER": ["N", "CA", "C", "O", "CB", "OG"],
        "LEU": ["N", "CA", "C", "O", "CB", "CG", "CD1", "CD2"],
    },
}

ATOM_OFFSETS = {
    "N": (-1.2, 0.6, 0.0),
    "CA": (0.0, 0.0, 0.0),
    "C": (1.2, 0.6, 0.0),
    "O": (1.3, 1.8, 0.0),
    "CB": (0.0, -1.0, 1.1),
    "OG": (0.0, -1.6, 2.3),
    "CG": (0.6, -1.7, 1.9),
    "CD1": (0.4, -3.0, 2.6),
    "CD2": (1.9, -1.2, 2.4),
}


def make_atoms(residues):
    """Atoms for a list of (residue type, CA position, atom names), serials from 1."""
    atoms = []
    serial = 1
    for resser, (restype, ca, names) in enumerate(residues, start=1):
        for name in names:
            offset = ATOM_OFFSETS[name]
            coords = tuple(c + o for c, o in zip(ca, offset))
            atoms.append(Atom(serial, resser, coords, name, restype))
            serial += 1
    return atoms


@pytest.fixture
def contact_types():
    return CONTACT_TYPES


@pytest.fixture
def triangle_table():
    """Three CA-only residues at (0,0,0), (4,0,0) and (0,4,0)."""
    atoms = [
        Atom(1, 1, (0.0, 0.0, 0.0), "CA", "ALA"),
        Atom(2, 2, (4.0, 0.0, 0.0), "CA", "GLY"),
        Atom(3, 3, (0.0, 4.0, 0.0), "CA", "SER"),
    ]
    return AtomTable(atoms, {1: "ALA", 2: "GLY", 3: "SER"}, CONTACT_TYPES)


@pytest.fixture
def peptide_table():
    """Small helix-like peptide with backbone and side chain atoms."""
    restypes = ["ALA", "GLY", "SER", "LEU", "ALA", "SER", "GLY", "LEU", "ALA", "SER"]
    residues = []
    for k, restype in enumerate(restypes):
        angle = np.radians(100.0 * k)
        ca = (2.3 * np.cos(angle), 2.3 * np.sin(angle), 1.5 * k)
        residues.append((restype, ca, CONTACT_TYPES["ALL"][restype]))
    atoms = make_atoms(residues)
    residue_types = {k: restype for k, restype in enumerate(restypes, start=1)}
    return AtomTable(atoms, residue_types, CONTACT_TYPES, sequence="AGSLASGLAS")


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
