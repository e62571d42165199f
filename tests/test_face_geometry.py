import math
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.exceptions import DegenerateFaceError
from core.parameters.global_parameters import GlobalParameters
from geometry import face_geometry
from geometry.face import Face
from geometry.triangle_ops import (
    triangle_area_vectors,
    triangle_centres,
    triangle_inertias,
)
from sample_faces import l_shape, regular_hexagon, scattered_store, twisted_quad, unit_square

TRIANGLE = np.array([[0.1, 0.2, 0.0], [1.3, -0.4, 0.5], [0.2, 1.1, 0.7]])


def test_fan_path_matches_triangle_formulas():
    a, b, c = TRIANGLE
    assert np.allclose(face_geometry.fan_area_vector(TRIANGLE), triangle_area_vectors(a, b, c))
    assert np.allclose(face_geometry.fan_centre(TRIANGLE, 1e-300), triangle_centres(a, b, c))

    ref = np.array([0.5, -0.3, 2.0])
    assert np.allclose(
        face_geometry.fan_inertia(TRIANGLE, ref, 2.5, 1e-300),
        triangle_inertias(a, b, c, ref, 2.5),
    )


def test_square_area_normal_centre():
    face, points = unit_square()
    assert np.allclose(face.area(points), [0.0, 0.0, 1.0])
    assert np.allclose(face.normal(points), [0.0, 0.0, 1.0])
    assert face.mag(points) == pytest.approx(1.0)
    assert np.allclose(face.centre(points), [0.5, 0.5, 0.0])


def test_reversed_face_has_opposite_area():
    face, points = l_shape()
    assert np.allclose(face.reverse_face().area(points), -face.area(points))
    assert face.mag(points) == pytest.approx(3.0)


def test_hexagon_area_matches_closed_form():
    face, points = regular_hexagon(2.0)
    expected = 3.0 * math.sqrt(3.0) / 2.0 * 4.0
    assert face.mag(points) == pytest.approx(expected)
    assert np.allclose(face.centre(points), [0.0, 0.0, 0.0], atol=1e-12)


def test_centre_is_independent_of_vertex_clustering():
    # A collinear vertex on the bottom edge pulls the vertex average off-centre.
    points = np.array(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0], [2.0, 2.0, 0.0], [0.0, 2.0, 0.0]]
    )
    face = Face(range(5))
    assert np.allclose(points.mean(axis=0), [1.0, 0.8, 0.0])
    assert np.allclose(face.centre(points), [1.0, 1.0, 0.0])


def test_l_shape_centre():
    face, points = l_shape()
    # Unit squares at (0.5, 0.5), (1.5, 0.5), (0.5, 1.5).
    assert np.allclose(face.centre(points), [5.0 / 6.0, 5.0 / 6.0, 0.0])


def test_non_planar_area_is_independent_of_fan_apex():
    face, points = twisted_quad()
    coords = face.points(points)
    # Vector area of a closed loop: 0.5 * sum(p_i x p_{i+1}), origin-independent.
    loop_area = 0.5 * np.cross(coords, np.roll(coords, -1, axis=0)).sum(axis=0)
    assert np.allclose(face.area(points), loop_area)

    shifted = points + np.array([3.0, -2.0, 7.0])
    assert np.allclose(face.area(shifted), loop_area)
    assert np.allclose(face.centre(shifted), face.centre(points) + [3.0, -2.0, 7.0])


def test_zero_area_face_falls_back_to_vertex_average(caplog):
    points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0], [3.0, 0.0, 0.0]])
    face = Face(range(4))
    with caplog.at_level("DEBUG", logger="polyface"):
        ctr = face.centre(points)
    assert np.allclose(ctr, [1.5, 0.0, 0.0])
    assert "vertex average" in caplog.text
    assert np.allclose(face.normal(points), [0.0, 0.0, 0.0])


def test_centre_threshold_is_configurable():
    face, points = unit_square()
    params = GlobalParameters({"vsmall": 10.0})
    # Projected fan area (doubled) is 2.0, below the threshold.
    assert np.allclose(face.centre(points, global_params=params), [0.5, 0.5, 0.0])
    points_off = np.array(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.5, 0.0]]
    )
    five = Face(range(5))
    assert np.allclose(five.centre(points_off, global_params=params), points_off.mean(axis=0))
    assert np.allclose(five.centre(points_off), [0.5, 0.5, 0.0])


def test_square_inertia_about_centre():
    face, points = unit_square()
    J = face.inertia(points, face.centre(points), density=1.0)
    expected = np.diag([1.0 / 12.0, 1.0 / 12.0, 1.0 / 6.0])
    assert np.allclose(J, expected)


def test_inertia_scales_with_density_and_is_symmetric():
    face, points = l_shape()
    ref = np.array([0.3, -0.1, 0.2])
    J1 = face.inertia(points, ref, density=1.0)
    J3 = face.inertia(points, ref, density=3.0)
    assert np.allclose(J3, 3.0 * J1)
    assert np.allclose(J1, J1.T)


def test_inertia_parallel_axis_theorem():
    face, points = regular_hexagon()
    ctr = face.centre(points)
    ref = ctr + np.array([0.0, 0.0, 2.0])
    J_c = face.inertia(points, ctr)
    J_ref = face.inertia(points, ref)
    d = ref - ctr
    area = face.mag(points)
    shift = area * (np.dot(d, d) * np.eye(3) - np.outer(d, d))
    assert np.allclose(J_ref, J_c + shift)


def test_point_store_can_be_a_plain_sequence():
    face, points = scattered_store()
    assert np.allclose(face.area(points), [0.0, 0.0, 4.0])
    assert np.allclose(face.centre(points), [1.0, 1.0, 0.0])
    assert face.points(points).shape == (4, 3)


@pytest.mark.parametrize("labels", [[], [0], [0, 1]])
def test_degenerate_faces_raise(labels):
    _, points = unit_square()
    face = Face(labels)
    with pytest.raises(DegenerateFaceError) as excinfo:
        face.area(points)
    assert excinfo.value.size == len(labels)
    with pytest.raises(DegenerateFaceError):
        face.centre(points)
    with pytest.raises(DegenerateFaceError):
        face.inertia(points, [0.0, 0.0, 0.0])
    with pytest.raises(DegenerateFaceError):
        face.swept_vol(points, points)
