"""Vectorized triangle geometry helpers used by the face kernel.

Every function accepts either a single triangle (``a``, ``b``, ``c`` of shape
``(3,)``) or stacks of triangles (shape ``(n, 3)``) and broadcasts.
"""

from __future__ import annotations

import numpy as np


def _fast_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Compute cross products for arrays of 3D vectors."""
    x = a[..., 1] * b[..., 2] - a[..., 2] * b[..., 1]
    y = a[..., 2] * b[..., 0] - a[..., 0] * b[..., 2]
    z = a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0]
    out = np.empty(x.shape + (3,), dtype=x.dtype)
    out[..., 0] = x
    out[..., 1] = y
    out[..., 2] = z
    return out


def _dot(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.einsum("...i,...i->...", a, b)


def triangle_area_vectors(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Return ``0.5 (b - a) x (c - a)``."""
    return 0.5 * _fast_cross(b - a, c - a)


def triangle_centres(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    return (a + b + c) / 3.0


def triangle_inertias(
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    ref_pt: np.ndarray,
    density: float = 1.0,
) -> np.ndarray:
    """Second-moment tensors of uniform-density triangles about ``ref_pt``.

    Returns ``density * integral(|r|^2 I - r r^T) dA`` with ``r`` measured from
    ``ref_pt``; shape ``(..., 3, 3)``.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    c = np.asarray(c, dtype=float)
    ref_pt = np.asarray(ref_pt, dtype=float)

    a_rel = a - ref_pt
    b_rel = b - ref_pt
    c_rel = c - ref_pt

    # Twice the triangle area.
    mag2 = np.asarray(np.linalg.norm(_fast_cross(b - a, c - a), axis=-1))

    s = a_rel + b_rel + c_rel
    trace_term = np.asarray(
        _dot(a_rel, a_rel) + _dot(b_rel, b_rel) + _dot(c_rel, c_rel) + _dot(s, s)
    )

    # V^T S V with S = (ones + I) / 24 reduces to (sum r r^T + s s^T) / 24.
    outer = (
        np.einsum("...i,...j->...ij", a_rel, a_rel)
        + np.einsum("...i,...j->...ij", b_rel, b_rel)
        + np.einsum("...i,...j->...ij", c_rel, c_rel)
        + np.einsum("...i,...j->...ij", s, s)
    )

    eye = np.eye(3)
    J = (mag2[..., None, None] / 24.0) * (trace_term[..., None, None] * eye - outer)
    return J * density


def triangle_swept_volumes(
    old: tuple[np.ndarray, np.ndarray, np.ndarray],
    new: tuple[np.ndarray, np.ndarray, np.ndarray],
) -> np.ndarray:
    """Volume swept by triangles moving from ``old`` to ``new`` vertices.

    The prism between the two configurations is cut into tetrahedra in two
    ways and the results averaged. Positive when the motion follows the
    right-hand normal of ``(a, b, c)``.
    """
    a, b, c = (np.asarray(p, dtype=float) for p in old)
    ta, tb, tc = (np.asarray(p, dtype=float) for p in new)

    return (1.0 / 12.0) * (
        _dot(ta - a, _fast_cross(b - a, c - a))
        + _dot(tb - b, _fast_cross(c - b, ta - b))
        + _dot(c - tc, _fast_cross(tb - tc, ta - tc))
        + _dot(ta - a, _fast_cross(b - a, c - a))
        + _dot(b - tb, _fast_cross(ta - tb, tc - tb))
        + _dot(c - tc, _fast_cross(b - tc, ta - tc))
    )
