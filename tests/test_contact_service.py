import logging

import pytest

from resgraph.config import DetectionSettings, setup_logging
from resgraph.domain.models.atom import Atom
from resgraph.domain.models.contact import Contact
from resgraph.errors import InvalidCutoffError
from resgraph.services.contact_service import ContactService, build_contact_graph
from resgraph.utils.benchmarking import Timer, TimingStats


@pytest.fixture
def triangle_atoms():
    return [
        Atom(1, 1, (0.0, 0.0, 0.0), "CA", "ALA"),
        Atom(2, 2, (4.0, 0.0, 0.0), "CA", "GLY"),
        Atom(3, 3, (0.0, 4.0, 0.0), "CA", "SER"),
    ]


class TestBuildContactGraph:
    """Tests for graphs built from pre-resolved atoms."""

    def test_undirected(self, triangle_atoms):
        graph = build_contact_graph(
            [triangle_atoms], 5.0, False, {1: "ALA", 2: "GLY", 3: "SER"}, contact_type="Ca"
        )
        assert [tuple(c) for c in graph.contacts] == [(1, 2), (1, 3)]
        assert graph.obs_length == 3

    def test_directed(self, triangle_atoms):
        side_chain = [Atom(10, 2, (4.0, 1.5, 0.0), "CB", "GLY")]
        graph = build_contact_graph(
            [triangle_atoms, side_chain], 5.0, True, {1: "ALA", 2: "GLY", 3: "SER"}
        )
        assert graph.directed
        # atom 2 and atom 10 share residue 2
        assert set(graph.contacts) == {
            Contact(1, 2, directed=True),
            Contact(3, 2, directed=True),
        }

    def test_side_count_must_match(self, triangle_atoms):
        with pytest.raises(ValueError):
            build_contact_graph([triangle_atoms], 5.0, True, {})
        with pytest.raises(ValueError):
            build_contact_graph([triangle_atoms, triangle_atoms], 5.0, False, {})

    def test_contact_type_must_match(self, triangle_atoms):
        with pytest.raises(ValueError):
            build_contact_graph([triangle_atoms], 5.0, False, {}, contact_type="BB/SC")

    def test_invalid_cutoff(self, triangle_atoms):
        with pytest.raises(InvalidCutoffError):
            build_contact_graph([triangle_atoms], 0.0, False, {})


class TestContactService:
    """Tests for the contact service defaults and distance matrix."""

    def test_detect_uses_settings(self, triangle_table):
        service = ContactService(settings=DetectionSettings(cutoff=4.5, contact_type="Ca"))
        graph = service.detect(triangle_table)
        assert graph.cutoff == 4.5
        assert graph.num_contacts == 2

    def test_distance_matrix(self, triangle_table):
        distances = ContactService().distance_matrix(triangle_table, "Ca")
        assert list(distances) == [(1, 2), (1, 3), (2, 3)]
        assert distances[(2, 3)] == pytest.approx(32 ** 0.5)

    def test_distance_matrix_keeps_shortest(self, peptide_table):
        distances = ContactService().distance_matrix(peptide_table, "BB")
        graph = ContactService().detect(peptide_table, "BB", 6.0)
        close = {pair for pair, d in distances.items() if d <= 6.0}
        assert close == {tuple(c) for c in graph.contacts}

    def test_interface_contacts(self, triangle_table):
        contacts = ContactService().interface_contacts(triangle_table, triangle_table, "Ca", 0.5)
        # each atom only meets its own copy
        assert [(c.atom_i, c.atom_j, c.distance) for c in contacts] == [
            (1, 1, 0.0),
            (2, 2, 0.0),
            (3, 3, 0.0),
        ]


def test_setup_logging(tmp_path):
    log_file = tmp_path / "resgraph.log"
    logger = setup_logging(verbose=True, log_file=log_file)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logging.getLogger("resgraph.services").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()

    logger = setup_logging()
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_timing():
    stats = TimingStats("graphs")
    assert "No timing data" in str(stats)
    with Timer("block") as timer:
        pass
    stats.add_timing(timer.elapsed(), num_atoms=10)
    stats.add_timing(0.5)
    assert stats.count == 2
    assert stats.atoms_processed == 10
    assert stats.total_time >= 0.5
    assert "graphs: 2 structures" in str(stats)
