import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from geometry.edge import FaceEdge
from geometry.face import Face, longest_edge


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_fc_index_cycles_back_after_size_steps(n):
    face = Face(range(10, 10 + n))
    for start in range(n):
        i = start
        for _ in range(n):
            i = face.fc_index(i)
        assert i == start

        i = start
        for _ in range(n):
            i = face.rc_index(i)
        assert i == start


def test_single_vertex_indices_are_zero():
    face = Face([7])
    assert face.fc_index(0) == 0
    assert face.rc_index(0) == 0


def test_next_and_prev_labels_wrap():
    face = Face([4, 8, 15, 16])
    assert face.next_label(3) == 4
    assert face.prev_label(0) == 16
    assert face.next_label(1) == 15


def test_edges_follow_traversal():
    face = Face([4, 8, 15])
    assert face.n_edges() == 3
    edges = face.edges()
    assert [(e.start, e.end) for e in edges] == [(4, 8), (8, 15), (15, 4)]
    assert face.face_edge(2) == FaceEdge(15, 4)


def test_face_edge_equality_ignores_direction():
    assert FaceEdge(1, 2) == FaceEdge(2, 1)
    assert FaceEdge(1, 2) != FaceEdge(1, 3)
    assert hash(FaceEdge(1, 2)) == hash(FaceEdge(2, 1))
    assert FaceEdge(1, 2).reversed() == FaceEdge(2, 1)
    assert (FaceEdge(1, 2).reversed().start, FaceEdge(1, 2).reversed().end) == (2, 1)


def test_which_returns_local_index_or_minus_one():
    face = Face([10, 20, 30])
    assert face.which(30) == 2
    assert face.which(10) == 0
    assert face.which(99) == -1


@pytest.mark.parametrize(
    "edge, expected",
    [
        ((1, 2), 1),
        ((2, 1), -1),
        ((3, 0), 1),
        ((0, 3), -1),
        ((0, 2), 0),
        ((7, 8), 0),
    ],
)
def test_edge_direction(edge, expected):
    face = Face([0, 1, 2, 3])
    assert face.edge_direction(FaceEdge(*edge)) == expected
    assert face.edge_direction(edge) == expected


def test_longest_edge_prefers_first_on_ties():
    points = np.array(
        [[0.0, 0.0, 0.0], [3.0, 0.0, 0.0], [3.0, 1.0, 0.0], [0.0, 1.0, 0.0]]
    )
    assert longest_edge(Face([0, 1, 2, 3]), points) == 0
    assert longest_edge(Face([1, 2, 3, 0]), points) == 1
    assert longest_edge(Face(), points) == -1


def test_edge_mag_reads_only_referenced_points():
    points = [(0.0, 0.0, 0.0), (3.0, 4.0, 0.0)]
    assert FaceEdge(0, 1).mag(points) == pytest.approx(5.0)
    assert np.allclose(FaceEdge(1, 0).vec(points), [-3.0, -4.0, 0.0])
