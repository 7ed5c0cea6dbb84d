"""Residue contact graphs and rigid superposition for biomolecular structures."""

from .config import DetectionSettings, setup_logging, SCALE
from .errors import (
    ResGraphError,
    SizeMismatchError,
    InvalidCutoffError,
    UnknownContactTypeError,
)
from .domain.models.atom import Atom
from .domain.models.atom_table import AtomTable
from .domain.models.contact import Contact, ContactList, AtomContact
from .domain.models.contact_graph import ContactGraph
from .domain.models.alignment_result import AlignmentResult
from .domain.implementations.spatial_index import SpatialIndex
from .domain.implementations.grid_contact_detector import GridContactDetector
from .domain.implementations.kabsch_superimposer import KabschSuperimposer
from .services.contact_service import ContactService, build_contact_graph
from .services.alignment_service import AlignmentService, align
from .services.batch_service import BatchContactService

__version__ = "0.1.0"

__all__ = [
    "DetectionSettings",
    "setup_logging",
    "SCALE",
    "ResGraphError",
    "SizeMismatchError",
    "InvalidCutoffError",
    "UnknownContactTypeError",
    "Atom",
    "AtomTable",
    "Contact",
    "ContactList",
    "AtomContact",
    "ContactGraph",
    "AlignmentResult",
    "SpatialIndex",
    "GridContactDetector",
    "KabschSuperimposer",
    "ContactService",
    "build_contact_graph",
    "AlignmentService",
    "align",
    "BatchContactService",
]
