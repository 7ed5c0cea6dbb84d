"""Infrastructure adapters feeding the core."""

from .adapters.biopython_adapter import BiopythonAdapter, atom_table_from_chain

__all__ = [
    "BiopythonAdapter",
    "atom_table_from_chain",
]
