"""Core domain models, interfaces and algorithms."""

from .models.contact import Contact, ContactList, AtomContact
from .models.contact_graph import ContactGraph
from .models.alignment_result import AlignmentResult
from .models.atom import Atom
from .models.atom_table import AtomTable
from .interfaces.coordinate_source import CoordinateSource
from .interfaces.structure_superimposer import StructureSuperimposer

__all__ = [
    "Contact",
    "ContactList",
    "AtomContact",
    "ContactGraph",
    "AlignmentResult",
    "Atom",
    "AtomTable",
    "CoordinateSource",
    "StructureSuperimposer",
]
