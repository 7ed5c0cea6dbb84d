import numpy as np
import pytest

from resgraph.domain.implementations.spatial_index import SpatialIndex, cell_size_for
from resgraph.domain.models.box import Box, GridCoord


@pytest.mark.parametrize(
    "cutoff,expected",
    [(8.0, 800), (4.1, 410), (0.29, 29), (5.55, 555), (0.001, 1)],
)
def test_cell_size(cutoff, expected):
    assert cell_size_for(cutoff) == expected


def test_cell_of_uses_floor():
    index = SpatialIndex(np.zeros((1, 3)), cutoff=5.0)
    assert index.cell_of((4.99, 0.0, -0.01)) == GridCoord(0, 0, -500)
    assert index.cell_of((5.0, 10.2, 0.0)) == GridCoord(500, 1000, 0)


def test_neighbor_counts():
    undirected = SpatialIndex(np.zeros((1, 3)), cutoff=5.0)
    directed = SpatialIndex(np.zeros((1, 3)), np.zeros((1, 3)), cutoff=5.0)
    origin = GridCoord(0, 0, 0)

    half = list(undirected.neighbor_coords(origin))
    full = list(directed.neighbor_coords(origin))
    assert len(half) == 13
    assert len(full) == 26
    assert origin not in full
    # the half shell never holds both a cell offset and its opposite
    for coord in half:
        assert GridCoord(-coord.x, -coord.y, -coord.z) not in half
    assert set(half) <= set(full)


def test_occupancy_histogram():
    points = [(0.1, 0.1, 0.1), (0.2, 0.2, 0.2), (0.3, 0.1, 0.4), (9.0, 9.0, 9.0)]
    index = SpatialIndex(points, cutoff=1.0)
    assert len(index) == 2
    assert index.occupancy_histogram() == {1: 1, 3: 1}


def test_candidates_include_all_close_pairs(rng):
    points = rng.uniform(0.0, 20.0, size=(120, 3))
    cutoff = 3.0
    index = SpatialIndex(points, cutoff=cutoff)

    candidates = {(i, j): d for i, j, d in index.iter_candidate_distances()}
    assert all(i < j for i, j in candidates)
    assert len(candidates) == len(list(index.iter_candidate_distances()))

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            d = np.linalg.norm(points[i] - points[j])
            if d <= cutoff:
                assert candidates[(i, j)] == pytest.approx(d)


def test_empty_index():
    index = SpatialIndex([], cutoff=4.0)
    assert len(index) == 0
    assert list(index.iter_candidate_distances()) == []


class TestBox:
    """Tests for grid cells."""

    def test_shared_box_yields_each_pair_once(self):
        box = Box(GridCoord(0, 0, 0), shared=True)
        for k in range(4):
            box.put_i_point(k, np.array([k, 0.0, 0.0]))
        pairs = [(i, j) for i, j, _ in box.distances_within_box()]
        assert pairs == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        assert box.size() == 4

    def test_separate_buckets(self):
        box = Box(GridCoord(0, 0, 0))
        box.put_i_point(0, np.array([0.0, 0.0, 0.0]))
        box.put_j_point(0, np.array([3.0, 4.0, 0.0]))
        assert list(box.distances_within_box()) == [(0, 0, 5.0)]
        assert box.size() == 2

    def test_distances_to_neighbor(self):
        box = Box(GridCoord(0, 0, 0), shared=True)
        other = Box(GridCoord(100, 0, 0), shared=True)
        box.put_i_point(0, np.array([0.5, 0.0, 0.0]))
        other.put_i_point(1, np.array([1.5, 0.0, 0.0]))
        assert list(box.distances_to_neighbor(other)) == [(0, 1, 1.0)]
