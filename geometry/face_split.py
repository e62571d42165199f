"""Decomposition of polygonal faces into triangles and quadrilaterals.

The splitter repeatedly cuts a face from its most concave vertex towards the
opposite vertex that best bisects that angle. Cutting there avoids creating
new sharp concavities in either half.

Results are written through a ``SplitCursor``. In count-only mode the cursor
just accumulates shape counts, which callers use to size the output lists.
A second, materializing pass with a fresh cursor then writes each shape at
``tri_faces[cursor.tri_index]`` / ``quad_faces[cursor.quad_index]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

import numpy as np

from core.circulator import Circulator
from core.exceptions import DegenerateFaceError
from core.parameters.global_parameters import resolve
from geometry.face_angles import calc_edges, most_concave_angle
from geometry.face_geometry import gather_points

if TYPE_CHECKING:
    from geometry.face import Face

logger = logging.getLogger("polyface.split")


class SplitTarget(Enum):
    TRIANGLES = "triangles"
    QUADS = "quads"


@dataclass
class SplitCursor:
    """Running shape counters; write positions when materializing."""

    tri_index: int = 0
    quad_index: int = 0

    @property
    def total(self) -> int:
        return self.tri_index + self.quad_index


def _store(buffer: Optional[MutableSequence], index: int, face: "Face") -> None:
    if buffer is None:
        raise ValueError("An output list is required unless count_only is set.")
    if index < len(buffer):
        buffer[index] = face
    elif index == len(buffer):
        buffer.append(face)
    else:
        raise IndexError(
            f"Write cursor {index} is past the end of an output list of length {len(buffer)}."
        )


def _bisecting_index(
    coords: np.ndarray, edges: np.ndarray, start: int, angle: float, vsmall: float
) -> int:
    """Return the vertex whose chord from ``start`` best bisects ``angle``."""
    n = len(coords)
    bisect_angle = angle / 2
    right_edge = edges[start]

    candidates = (start + 2 + np.arange(n - 3)) % n
    split_edges = coords[candidates] - coords[start]
    split_edges /= (np.linalg.norm(split_edges, axis=1) + vsmall)[:, None]

    split_angles = np.arccos(np.clip(split_edges @ right_edge, -1.0, 1.0))
    angle_diff = np.abs(split_angles - bisect_angle)

    # argmin keeps the first candidate on ties.
    return int(candidates[int(np.argmin(angle_diff))])


def split(
    face: "Sequence[int]",
    points,
    *,
    target: SplitTarget = SplitTarget.TRIANGLES,
    count_only: bool = False,
    cursor: Optional[SplitCursor] = None,
    tri_faces: Optional[MutableSequence] = None,
    quad_faces: Optional[MutableSequence] = None,
    global_params=None,
) -> int:
    """Split ``face`` and return the number of shapes this call produced.

    Args:
        face: The face to split (a ``Face`` or any label sequence); left
            untouched. Halves and triangles keep its type.
        points: Point store the face labels index into.
        target: ``TRIANGLES`` splits quads too; ``QUADS`` keeps them.
        count_only: Only advance ``cursor``; nothing is written.
        cursor: Shared counters / write positions. A fresh one is used when
            omitted.
        tri_faces, quad_faces: Output lists written at the cursor positions.
            They may be pre-sized or empty (shapes are appended).
        global_params: Tolerance overrides.

    Raises:
        DegenerateFaceError: ``face`` has fewer than three vertices.
    """
    if cursor is None:
        cursor = SplitCursor()
    old_total = cursor.total
    n = len(face)

    if n <= 2:
        logger.error("Asked to split a face with %d vertices: %s", n, list(face))
        raise DegenerateFaceError(n, operation="split")

    if n == 3:
        if not count_only:
            _store(tri_faces, cursor.tri_index, type(face)(face))
        cursor.tri_index += 1

    elif n == 4:
        if target is SplitTarget.QUADS:
            if not count_only:
                _store(quad_faces, cursor.quad_index, type(face)(face))
            cursor.quad_index += 1
        elif count_only:
            cursor.tri_index += 2
        else:
            # Cut along the diagonal from the largest internal angle.
            coords = gather_points(face, points)
            edges = calc_edges(coords, global_params)
            start, _ = most_concave_angle(coords, edges)

            q0, q1, q2, q3 = Circulator(face, start).walk(4)

            tri_type = type(face)
            _store(tri_faces, cursor.tri_index, tri_type([q0, q1, q2]))
            cursor.tri_index += 1
            _store(tri_faces, cursor.tri_index, tri_type([q2, q3, q0]))
            cursor.tri_index += 1

    else:
        vsmall = resolve(global_params).vsmall
        coords = gather_points(face, points)
        edges = calc_edges(coords, global_params)
        start, angle = most_concave_angle(coords, edges)
        min_index = _bisecting_index(coords, edges, start, angle, vsmall)

        # face1: start .. min_index, face2: min_index .. start
        diff = min_index - start if min_index > start else min_index + n - start
        n_points1 = diff + 1
        n_points2 = n - diff + 1

        logger.debug(
            "Splitting %d-gon at vertex %d (angle %.4f) towards vertex %d -> %d + %d",
            n,
            start,
            angle,
            min_index,
            n_points1,
            n_points2,
        )

        face1 = type(face)(Circulator(face, start).walk(n_points1))
        face2 = type(face)(Circulator(face, min_index).walk(n_points2))

        for half in (face1, face2):
            split(
                half,
                points,
                target=target,
                count_only=count_only,
                cursor=cursor,
                tri_faces=tri_faces,
                quad_faces=quad_faces,
                global_params=global_params,
            )

    return cursor.total - old_total
