"""Two-label edge value used when walking face boundaries."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class FaceEdge(NamedTuple):
    start: int
    end: int

    def __eq__(self, other):
        if not isinstance(other, tuple) or len(other) != 2:
            return NotImplemented
        return (self.start == other[0] and self.end == other[1]) or (
            self.start == other[1] and self.end == other[0]
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((min(self.start, self.end), max(self.start, self.end)))

    def reversed(self) -> "FaceEdge":
        return FaceEdge(self.end, self.start)

    def vec(self, points) -> np.ndarray:
        """Vector from ``start`` to ``end``."""
        return np.asarray(points[self.end], dtype=float) - np.asarray(
            points[self.start], dtype=float
        )

    def mag(self, points) -> float:
        return float(np.linalg.norm(self.vec(points)))
