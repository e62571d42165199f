"""Area, centre, inertia and swept volume of polygonal faces.

Faces with more than three vertices are handled by a fan decomposition: every
edge ``(p, pNext)`` forms a triangle with an interior apex. Summing the fan
keeps the results consistent for concave and non-planar faces, where the
textbook polygon formulas assume flatness.

The ``fan_*`` functions always take the general path; the ``polygon_*``
functions use the direct triangle formulas when given exactly three points.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from core.exceptions import DegenerateFaceError
from core.parameters.global_parameters import resolve
from geometry.triangle_ops import (
    _dot,
    _fast_cross,
    triangle_area_vectors,
    triangle_centres,
    triangle_inertias,
    triangle_swept_volumes,
)

logger = logging.getLogger("polyface")


def gather_points(face: Sequence[int], points) -> np.ndarray:
    """Return the ``(n, 3)`` coordinates referenced by ``face``.

    Only the referenced rows are read from ``points``.
    """
    if isinstance(points, np.ndarray):
        rows = np.fromiter(face, dtype=np.intp, count=len(face))
        return np.asarray(points[rows], dtype=float)
    return np.array([points[i] for i in face], dtype=float).reshape(len(face), 3)


def _require_polygon(face: Sequence[int], operation: str) -> None:
    if len(face) < 3:
        logger.error("Cannot %s a face with %d vertices: %s", operation, len(face), list(face))
        raise DegenerateFaceError(len(face), operation=operation)


# ---------------------------------------------------------------------------
# Coordinate-level kernels
# ---------------------------------------------------------------------------


def fan_area_vector(coords: np.ndarray) -> np.ndarray:
    """Sum of ``0.5 (pNext - p) x (pAvg - p)`` over all edges."""
    p_avg = coords.mean(axis=0)
    p_next = np.roll(coords, -1, axis=0)
    return 0.5 * _fast_cross(p_next - coords, p_avg - coords).sum(axis=0)


def polygon_area_vector(coords: np.ndarray) -> np.ndarray:
    if len(coords) == 3:
        return triangle_area_vectors(coords[0], coords[1], coords[2])
    return fan_area_vector(coords)


def unit_normal(area_vector: np.ndarray) -> np.ndarray:
    """Normalise ``area_vector``; a zero vector stays zero."""
    mag = float(np.linalg.norm(area_vector))
    if mag > 0.0:
        return area_vector / mag
    return np.zeros(3)


def fan_centre(coords: np.ndarray, vsmall: float) -> np.ndarray:
    """Centroid from the fan about the vertex average.

    Each fan triangle is weighted by its area projected on the face normal,
    which is signed. That makes the result independent of the vertex average
    used as the apex.
    """
    p_avg = coords.mean(axis=0)
    p_next = np.roll(coords, -1, axis=0)

    a = _fast_cross(p_next - coords, p_avg - coords)
    n_hat = unit_normal(a.sum(axis=0))

    an = _dot(a, n_hat)
    c = coords + p_next + p_avg

    sum_an = float(an.sum())
    if sum_an > vsmall:
        return (1.0 / 3.0) * (an[:, None] * c).sum(axis=0) / sum_an

    logger.debug(
        "Projected face area %.3e below threshold; using the vertex average as centre.",
        sum_an,
    )
    return p_avg


def polygon_centre(coords: np.ndarray, vsmall: float) -> np.ndarray:
    if len(coords) == 3:
        return triangle_centres(coords[0], coords[1], coords[2])
    return fan_centre(coords, vsmall)


def fan_inertia(
    coords: np.ndarray, ref_pt: np.ndarray, density: float, vsmall: float
) -> np.ndarray:
    """Sum of the inertia of every ``(p, pNext, centre)`` triangle."""
    ctr = polygon_centre(coords, vsmall)
    p_next = np.roll(coords, -1, axis=0)
    J = triangle_inertias(coords, p_next, ctr, ref_pt, density)
    return J.sum(axis=0)


def polygon_inertia(
    coords: np.ndarray, ref_pt: np.ndarray, density: float, vsmall: float
) -> np.ndarray:
    if len(coords) == 3:
        return triangle_inertias(coords[0], coords[1], coords[2], ref_pt, density)
    return fan_inertia(coords, ref_pt, density, vsmall)


def fan_swept_vol(old_coords: np.ndarray, new_coords: np.ndarray, vsmall: float) -> float:
    """Swept volume as the sum over edge triangles with the centre last."""
    old_ctr = polygon_centre(old_coords, vsmall)
    new_ctr = polygon_centre(new_coords, vsmall)

    old_next = np.roll(old_coords, -1, axis=0)
    new_next = np.roll(new_coords, -1, axis=0)

    sv = triangle_swept_volumes(
        (old_coords, old_next, np.broadcast_to(old_ctr, old_coords.shape)),
        (new_coords, new_next, np.broadcast_to(new_ctr, new_coords.shape)),
    )
    return float(sv.sum())


# ---------------------------------------------------------------------------
# Face-level operations
# ---------------------------------------------------------------------------


def area(face: Sequence[int], points) -> np.ndarray:
    """Area vector of ``face``: magnitude is the area, direction the normal."""
    _require_polygon(face, "compute the area of")
    return polygon_area_vector(gather_points(face, points))


def normal(face: Sequence[int], points) -> np.ndarray:
    return unit_normal(area(face, points))


def mag(face: Sequence[int], points) -> float:
    return float(np.linalg.norm(area(face, points)))


def centre(face: Sequence[int], points, global_params=None) -> np.ndarray:
    _require_polygon(face, "compute the centre of")
    vsmall = resolve(global_params).vsmall
    return polygon_centre(gather_points(face, points), vsmall)


def inertia(
    face: Sequence[int],
    points,
    ref_pt,
    density: float = 1.0,
    global_params=None,
) -> np.ndarray:
    """Inertia tensor of the face as a lamina of ``density`` about ``ref_pt``."""
    _require_polygon(face, "compute the inertia of")
    vsmall = resolve(global_params).vsmall
    return polygon_inertia(
        gather_points(face, points),
        np.asarray(ref_pt, dtype=float),
        density,
        vsmall,
    )


def swept_vol(face: Sequence[int], old_points, new_points, global_params=None) -> float:
    """Volume swept by ``face`` moving from ``old_points`` to ``new_points``.

    Triangles take the fan path as well. The direct triangle formula would
    disagree slightly with the fan of a polygon sharing the same cell, so it
    is not used here.
    """
    _require_polygon(face, "compute the swept volume of")
    vsmall = resolve(global_params).vsmall
    return fan_swept_vol(
        gather_points(face, old_points), gather_points(face, new_points), vsmall
    )
