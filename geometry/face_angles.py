"""Edge directions and interior-angle classification for polygonal faces."""

from __future__ import annotations

import numpy as np

from core.circulator import Circulator
from core.parameters.global_parameters import resolve
from geometry.face_geometry import polygon_area_vector
from geometry.triangle_ops import _dot, _fast_cross


def calc_edges(coords: np.ndarray, global_params=None) -> np.ndarray:
    """Return one unit vector per edge ``i -> i + 1`` (wrapping).

    Lengths are padded with ``vsmall`` so coincident points produce a
    near-zero vector instead of a division error.
    """
    vsmall = resolve(global_params).vsmall
    vec = np.roll(coords, -1, axis=0) - coords
    return vec / (np.linalg.norm(vec, axis=1) + vsmall)[:, None]


def edge_cos(edges: np.ndarray, index: int) -> float:
    """Cosine of the interior angle at vertex ``index``."""
    edge_circ = Circulator(edges, index)
    left = edge_circ.prev()
    right = edge_circ()
    # Negate the left edge so both directions leave the vertex.
    return float(-np.dot(left, right))


def interior_angles(edges: np.ndarray, area_vector: np.ndarray) -> np.ndarray:
    """Interior angle at every vertex, in ``(0, 2 pi)``.

    The turn between the incoming (left) and outgoing (right) edge gives the
    exterior angle. A vertex is concave when ``right x left`` points along the
    face area vector.
    """
    left = np.roll(edges, 1, axis=0)
    right = edges

    edge_normal = _fast_cross(right, left)
    turn = np.arccos(np.clip(_dot(left, right), -1.0, 1.0))

    concave = _dot(edge_normal, area_vector) > 0
    return np.where(concave, np.pi + turn, np.pi - turn)


def interior_angle(edges: np.ndarray, area_vector: np.ndarray, index: int) -> float:
    edge_circ = Circulator(edges, index)
    left = edge_circ.prev()
    right = edge_circ()

    turn = float(np.arccos(max(-1.0, min(1.0, float(np.dot(left, right))))))
    if np.dot(np.cross(right, left), area_vector) > 0:
        return np.pi + turn
    return np.pi - turn


def most_concave_angle(
    coords: np.ndarray, edges: np.ndarray, area_vector: np.ndarray | None = None
) -> tuple[int, float]:
    """Return ``(index, angle)`` of the largest interior angle.

    Ties resolve to the first vertex in traversal order.
    """
    if area_vector is None:
        area_vector = polygon_area_vector(coords)

    angles = interior_angles(edges, area_vector)
    index = int(np.argmax(angles))
    return index, float(angles[index])
