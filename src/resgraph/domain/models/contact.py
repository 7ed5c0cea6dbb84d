#!/usr/bin/env python3
# src/resgraph/domain/models/contact.py

"""
Domain models for residue-residue contacts and sets of them.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set


@dataclass(frozen=True, order=True)
class Contact:
    """A pair of residue serials in contact.

    Undirected contacts are stored with ``i < j`` so that ``Contact(3, 1)`` and
    ``Contact(1, 3)`` compare and hash equal. Directed contacts keep the order
    they were given in: ``i`` is on the first atom subset, ``j`` on the second.
    """

    i: int
    j: int
    directed: bool = False

    def __post_init__(self):
        if self.i == self.j:
            raise ValueError(f"A residue can't be in contact with itself: {self.i}")
        if not self.directed and self.i > self.j:
            i, j = self.j, self.i
            object.__setattr__(self, "i", i)
            object.__setattr__(self, "j", j)

    @property
    def range(self) -> int:
        """Sequence separation of the two residues."""
        return abs(self.i - self.j)

    def other(self, resser: int) -> int:
        """Residue at the other end of the contact from ``resser``."""
        if resser == self.i:
            return self.j
        if resser == self.j:
            return self.i
        raise ValueError(f"Residue {resser} is not part of contact {self}")

    def __iter__(self) -> Iterator[int]:
        yield self.i
        yield self.j

    def __str__(self) -> str:
        sep = "->" if self.directed else "-"
        return f"{self.i}{sep}{self.j}"


class ContactList:
    """Set of contacts with no duplicates."""

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: Set[Contact] = set(contacts) if contacts is not None else set()

    def add(self, contact: Contact) -> bool:
        """Add a contact, returning False if it was already present."""
        if contact in self._contacts:
            return False
        self._contacts.add(contact)
        return True

    def remove(self, contact: Contact) -> None:
        """Remove a contact, raising KeyError if absent."""
        self._contacts.remove(contact)

    def discard(self, contact: Contact) -> bool:
        """Remove a contact if present, returning whether anything was removed."""
        if contact not in self._contacts:
            return False
        self._contacts.discard(contact)
        return True

    def max_node(self) -> int:
        """Largest residue serial taking part in any contact (0 if empty)."""
        return max((max(c.i, c.j) for c in self._contacts), default=0)

    def copy(self) -> "ContactList":
        # Contacts are immutable, copying the set is a deep copy
        return ContactList(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, contact: object) -> bool:
        return contact in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(sorted(self._contacts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactList):
            return NotImplemented
        return self._contacts == other._contacts

    def __repr__(self) -> str:
        return f"ContactList({len(self._contacts)} contacts)"


@dataclass(frozen=True, order=True)
class AtomContact:
    """Two atoms within the cutoff, with the residues they belong to."""

    atom_i: int
    atom_j: int
    distance: float
    residue_i: int = 0
    residue_j: int = 0
