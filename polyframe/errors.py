from __future__ import annotations


class GeometryError(Exception):
    """Base class for violated geometric preconditions."""


class UndefinedNormalization(GeometryError):
    """Raised when a direction is requested from the zero vector."""


class InsufficientVertices(GeometryError):
    """Raised when a polygon traversal runs out of vertices."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"expected at least {required} vertices, got {available}")
        self.required = required
        self.available = available


__all__ = [
    "GeometryError",
    "UndefinedNormalization",
    "InsufficientVertices",
]
