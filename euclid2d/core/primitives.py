"""Point and vector primitives.

Both types are immutable values. ``Vector`` can never hold a zero
displacement: construction checks the components for exact zero (no
epsilon), so a vector built from two points that differ by any amount,
however small, is accepted.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import ZeroLengthVectorError
from .logging_utils import get_logger

logger = get_logger('euclid2d.primitives')

__all__ = ['Point', 'Vector']


@dataclass(frozen=True)
class Point:
    """A point in the plane."""
    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Vector:
    """A non-zero displacement in the plane."""
    dx: float
    dy: float

    def __post_init__(self):
        if self.dx == 0 and self.dy == 0:
            logger.debug("rejecting zero-length vector")
            raise ZeroLengthVectorError()

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Vector:
        """Displacement from p1 to p2. Raises ZeroLengthVectorError if p1 == p2."""
        return cls(p2.x - p1.x, p2.y - p1.y)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def dot(self, other: Vector) -> float:
        return self.dx * other.dx + self.dy * other.dy

    def angle(self, other: Vector) -> float:
        """Angle between two vectors in degrees, in [0, 180].

        The cosine is clipped to [-1, 1] so rounding past the boundary for
        (anti)parallel vectors does not raise a math domain error.
        """
        magnitudes = self.magnitude * other.magnitude
        if magnitudes == 0:
            raise ZeroLengthVectorError("Cannot measure the angle of a zero-length vector")
        cosang = float(np.clip(self.dot(other) / magnitudes, -1.0, 1.0))
        return math.acos(cosang) * 180.0 / math.pi

    def to_array(self) -> np.ndarray:
        return np.array([self.dx, self.dy], dtype=np.float64)
