"""Services wiring the core algorithms together."""

from .contact_service import ContactService, build_contact_graph
from .alignment_service import AlignmentService, align
from .batch_service import BatchContactService, BatchResult

__all__ = [
    "ContactService",
    "build_contact_graph",
    "AlignmentService",
    "align",
    "BatchContactService",
    "BatchResult",
]
