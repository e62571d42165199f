"""Custom exception types for the face kernel."""

from __future__ import annotations


class PolyfaceError(Exception):
    """Base class for domain-specific errors."""


class DegenerateFaceError(PolyfaceError):
    """Raised when an operation needs at least three vertices."""

    def __init__(
        self,
        size: int,
        message: str | None = None,
        *,
        operation: str | None = None,
    ) -> None:
        if message is None:
            what = operation or "process"
            message = (
                f"Serious problem: asked to {what} a face with {size} vertices. "
                "A face needs at least 3 vertices."
            )
        super().__init__(message)
        self.size = size
        self.operation = operation


__all__ = ["PolyfaceError", "DegenerateFaceError"]
