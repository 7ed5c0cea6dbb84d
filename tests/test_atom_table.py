import logging

import pytest

from resgraph.domain.models.atom import Atom
from resgraph.domain.models.atom_table import AtomTable
from resgraph.errors import UnknownContactTypeError


@pytest.fixture
def incomplete_table(contact_types):
    atoms = [
        Atom(1, 1, (0.0, 0.0, 0.0), "N", "ALA"),
        Atom(2, 1, (1.4, 0.0, 0.0), "CA", "ALA"),
        Atom(3, 1, (2.0, 1.2, 0.0), "C", "ALA"),
        # residue 1 lacks O, residue 2 is C-terminal with OXT only
        Atom(4, 2, (3.3, 1.3, 0.0), "N", "GLY"),
        Atom(5, 2, (4.0, 2.5, 0.0), "CA", "GLY"),
        Atom(6, 2, (5.4, 2.3, 0.0), "C", "GLY"),
        Atom(7, 2, (6.1, 3.3, 0.0), "OXT", "GLY"),
        Atom(8, 3, (9.0, 0.0, 0.0), "C1", "HOH"),
    ]
    return AtomTable(atoms, {1: "ALA", 2: "GLY", 3: "HOH"}, contact_types)


class TestAtomTable:
    """Tests for contact type resolution."""

    def test_coords_sorted_by_serial(self, triangle_table):
        coords = triangle_table.get_coords_for_ct("Ca")
        assert list(coords) == [1, 2, 3]
        assert coords[2].tolist() == [4.0, 0.0, 0.0]

    def test_missing_atom_is_skipped_with_warning(self, incomplete_table, caplog):
        with caplog.at_level(logging.WARNING):
            coords = incomplete_table.get_coords_for_ct("BB")
        assert list(coords) == [1, 2, 3, 4, 5, 6, 7]
        assert "Couldn't find O atom for resser=1" in caplog.text

    def test_terminal_oxygen_fallback(self, incomplete_table):
        coords = incomplete_table.get_coords_for_ct_by_key("BB")
        assert coords[(2, "O")].tolist() == [6.1, 3.3, 0.0]
        assert (1, "O") not in coords

    def test_uncovered_residue_type(self, incomplete_table, caplog):
        with caplog.at_level(logging.WARNING):
            coords = incomplete_table.get_coords_for_ct("SC")
        assert coords == {}
        assert "No SC atoms defined for residue type GLY" in caplog.text

    def test_unknown_contact_type(self, triangle_table):
        with pytest.raises(UnknownContactTypeError) as excinfo:
            triangle_table.get_coords_for_ct("HEAVY")
        assert isinstance(excinfo.value, KeyError)
        assert "HEAVY" in str(excinfo.value)

    def test_residue_lookup(self, incomplete_table):
        assert incomplete_table.get_resser_from_atomser(7) == 2
        assert incomplete_table.residue_types() == {1: "ALA", 2: "GLY", 3: "HOH"}
        assert len(incomplete_table) == 8

    def test_duplicate_serial(self, contact_types):
        atoms = [Atom(1, 1, (0, 0, 0), "CA"), Atom(1, 2, (1, 0, 0), "CA")]
        with pytest.raises(ValueError):
            AtomTable(atoms, {1: "ALA", 2: "ALA"}, contact_types)
