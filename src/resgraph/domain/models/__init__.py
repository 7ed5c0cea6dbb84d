"""Domain model classes."""

from .atom import Atom
from .atom_table import AtomTable
from .box import Box, GridCoord
from .contact import AtomContact, Contact, ContactList
from .contact_graph import ContactGraph
from .alignment_result import AlignmentResult

__all__ = [
    "Atom",
    "AtomTable",
    "Box",
    "GridCoord",
    "AtomContact",
    "Contact",
    "ContactList",
    "ContactGraph",
    "AlignmentResult",
]
