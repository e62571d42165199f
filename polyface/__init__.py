"""Package utilities for polyface.

The kernel lives in the top-level packages `geometry/`, `core/` and
`runtime/`. This package gives them a versioned entry point.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from core.exceptions import DegenerateFaceError, PolyfaceError
from geometry.face import Face, longest_edge
from geometry.face_compare import compare, same_vertices
from geometry.face_split import SplitCursor, SplitTarget, split
from runtime.logging_config import setup_logging

try:
    __version__ = version("polyface")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "DegenerateFaceError",
    "Face",
    "PolyfaceError",
    "SplitCursor",
    "SplitTarget",
    "compare",
    "longest_edge",
    "same_vertices",
    "setup_logging",
    "split",
]
