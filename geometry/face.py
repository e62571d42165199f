# face.py

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from core.circulator import Circulator
from core.parameters.global_parameters import resolve
from geometry import face_compare, face_geometry, face_split
from geometry.edge import FaceEdge
from geometry.face_split import SplitCursor, SplitTarget

logger = logging.getLogger("polyface")


class Face(list[int]):
    """A polygonal face: a circular list of point labels.

    The labels index into a point store owned by the caller. The traversal
    order defines the face orientation through the right-hand rule. Geometric
    quantities are recomputed from the point store on every call.
    """

    def __init__(self, labels: Iterable[int] = ()):
        super().__init__(int(label) for label in labels)

    @classmethod
    def from_tri_face(cls, tri: Iterable[int]) -> "Face":
        labels = list(tri)
        if len(labels) != 3:
            raise ValueError(f"Expected 3 labels for a triangle, got {len(labels)}.")
        return cls(labels)

    def __repr__(self) -> str:
        return f"Face({list(self)})"

    def __getitem__(self, index):  # type: ignore[override]
        out = super().__getitem__(index)
        if isinstance(index, slice):
            return Face(out)
        return out

    def copy(self) -> "Face":
        return Face(self)

    # -- local index arithmetic ---------------------------------------------

    def fc_index(self, i: int) -> int:
        """Index of the next vertex, wrapping at the end."""
        return 0 if i == len(self) - 1 else i + 1

    def rc_index(self, i: int) -> int:
        """Index of the previous vertex, wrapping at the start."""
        return i - 1 if i else len(self) - 1

    def next_label(self, i: int) -> int:
        return Circulator(self, i).next()

    def prev_label(self, i: int) -> int:
        return Circulator(self, i).prev()

    # -- edges --------------------------------------------------------------

    def n_edges(self) -> int:
        return len(self)

    def face_edge(self, n: int) -> FaceEdge:
        """Edge ``n``, running from vertex ``n`` to the next vertex."""
        return FaceEdge(self[n], self.next_label(n))

    def edges(self) -> list[FaceEdge]:
        return [self.face_edge(i) for i in range(len(self))]

    def edge_direction(self, edge) -> int:
        """Return 1 if ``edge`` runs along the face, -1 if against it, else 0."""
        start, end = edge[0], edge[1]
        for i, label in enumerate(self):
            if label == start:
                if self.prev_label(i) == end:
                    return -1
                if self.next_label(i) == end:
                    return 1
                return 0
            if label == end:
                if self.prev_label(i) == start:
                    return 1
                if self.next_label(i) == start:
                    return -1
                return 0
        return 0

    def which(self, global_index: int) -> int:
        """Local position of ``global_index``, or -1."""
        for local_idx, label in enumerate(self):
            if label == global_index:
                return local_idx
        return -1

    # -- structural changes -------------------------------------------------

    def collapse(self) -> int:
        """Remove consecutive duplicate labels in place, including across the
        wrap-around, and return the new size."""
        if len(self) > 1:
            ci = 0
            for i in range(1, len(self)):
                if self[i] != self[ci]:
                    ci += 1
                    self[ci] = self[i]

            if self[ci] != self[0]:
                ci += 1

            del self[ci:]

        return len(self)

    def flip(self) -> None:
        """Reverse the traversal in place, keeping vertex 0 first."""
        n = len(self)
        if n > 2:
            for i in range(1, (n + 1) // 2):
                self[i], self[n - i] = self[n - i], self[i]

    def reverse_face(self) -> "Face":
        """Return the reversed face; the starting vertex is unchanged."""
        if not self:
            return Face()
        return Face([self[0]] + [self[len(self) - i] for i in range(1, len(self))])

    # -- geometry -----------------------------------------------------------

    def points(self, points) -> np.ndarray:
        return face_geometry.gather_points(self, points)

    def area(self, points) -> np.ndarray:
        return face_geometry.area(self, points)

    def normal(self, points) -> np.ndarray:
        return face_geometry.normal(self, points)

    def mag(self, points) -> float:
        return face_geometry.mag(self, points)

    def centre(self, points, global_params=None) -> np.ndarray:
        return face_geometry.centre(self, points, global_params)

    def inertia(self, points, ref_pt, density: float = 1.0, global_params=None) -> np.ndarray:
        return face_geometry.inertia(self, points, ref_pt, density, global_params)

    def swept_vol(self, old_points, new_points, global_params=None) -> float:
        return face_geometry.swept_vol(self, old_points, new_points, global_params)

    # -- decomposition ------------------------------------------------------

    def n_triangles(self) -> int:
        """Number of triangles from any triangulation of the face."""
        return len(self) - 2

    def split(self, points, **kwargs) -> int:
        return face_split.split(self, points, **kwargs)

    def triangles(self, points, global_params=None) -> list["Face"]:
        tri_faces: list[Face] = []
        self.split(
            points,
            target=SplitTarget.TRIANGLES,
            tri_faces=tri_faces,
            global_params=global_params,
        )
        return tri_faces

    def n_triangles_quads(self, points, global_params=None) -> tuple[int, int]:
        cursor = SplitCursor()
        self.split(
            points,
            target=SplitTarget.QUADS,
            count_only=True,
            cursor=cursor,
            global_params=global_params,
        )
        return cursor.tri_index, cursor.quad_index

    def triangles_quads(self, points, global_params=None) -> tuple[list["Face"], list["Face"]]:
        """Split into triangles and quads using a count pass then a write pass."""
        n_tris, n_quads = self.n_triangles_quads(points, global_params)
        tri_faces: list[Face | None] = [None] * n_tris
        quad_faces: list[Face | None] = [None] * n_quads

        self.split(
            points,
            target=SplitTarget.QUADS,
            cursor=SplitCursor(),
            tri_faces=tri_faces,
            quad_faces=quad_faces,
            global_params=global_params,
        )
        logger.debug("Split %r into %d triangles and %d quads", self, n_tris, n_quads)
        return tri_faces, quad_faces  # type: ignore[return-value]

    # -- comparison ---------------------------------------------------------

    @staticmethod
    def compare(a, b) -> int:
        return face_compare.compare(a, b)

    @staticmethod
    def same_vertices(a, b) -> bool:
        return face_compare.same_vertices(a, b)


def longest_edge(face: Face, points, global_params=None) -> int:
    """Index of the longest edge of ``face``, or -1 for an empty face."""
    longest_edge_i = -1
    longest_edge_length = -resolve(global_params).small

    for ed_i, edge in enumerate(face.edges()):
        edge_length = edge.mag(points)
        if edge_length > longest_edge_length:
            longest_edge_i = ed_i
            longest_edge_length = edge_length

    return longest_edge_i
