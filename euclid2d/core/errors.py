"""Exception types raised by geometry construction and queries."""
from __future__ import annotations

from typing import Optional, Sequence


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class InvalidPointsCountError(GeometryError):
    """A shape received the wrong number of points."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Invalid points count: expected={expected}, got={got}")


class ZeroLengthVectorError(GeometryError):
    """A vector would have zero length."""

    def __init__(self, message: str = "Zero-length vector"):
        super().__init__(message)


class InvalidTriangleError(GeometryError):
    """Three points violate the strict triangle inequality."""

    def __init__(self, sides: Optional[Sequence[float]] = None):
        self.sides = tuple(sides) if sides is not None else None
        msg = "Invalid triangle"
        if self.sides is not None:
            msg += ": sides=(" + ", ".join(f"{s:.6g}" for s in self.sides) + ")"
        super().__init__(msg)


class InvalidQuadrilateralError(GeometryError):
    """Reserved for quadrilateral shapes; not raised by the current shapes."""


__all__ = [
    'GeometryError',
    'InvalidPointsCountError',
    'ZeroLengthVectorError',
    'InvalidTriangleError',
    'InvalidQuadrilateralError',
]
