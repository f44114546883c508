"""Shape capability and its two variants, Line and Triangle.

``Shape`` is abstract: only ``Line`` and ``Triangle`` implement it. Each
variant owns its validated point tuple and computes every derived property
from those points on demand. Validation failures raise ``GeometryError``
subclasses and never terminate the process.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional, Tuple

import numpy as np

from .classification import AngleType, SideType, classify_angle, classify_sides
from .config import GeometryConfig, DEFAULT_CONFIG
from .constants import LINE_POINTS, TRIANGLE_POINTS
from .errors import InvalidPointsCountError, InvalidTriangleError
from .logging_utils import get_logger
from .primitives import Point, Vector

logger = get_logger('euclid2d.shapes')

__all__ = ['Shape', 'Line', 'Triangle', 'describe_shape']


class Shape(ABC):
    """Ordered, non-empty point sequence with a display name.

    Subclasses set ``point_count`` and implement ``perimeter`` and ``area``.
    """

    point_count: ClassVar[int]

    def __init__(self, points: Iterable[Point], name: Optional[str] = None,
                 config: Optional[GeometryConfig] = None):
        pts = tuple(points)
        if not pts:
            raise InvalidPointsCountError(expected=1, got=0)
        self._points: Tuple[Point, ...] = pts
        self.config = config if config is not None else DEFAULT_CONFIG
        self.name = name if name is not None else self.config.names['unknown']

    @classmethod
    def from_points(cls, points: Iterable[Point], config: Optional[GeometryConfig] = None):
        """Build the variant from a point sequence of exactly ``point_count`` points."""
        if getattr(cls, 'point_count', None) is None:
            raise TypeError(f"{cls.__name__} does not define point_count; use Line or Triangle")
        pts = tuple(points)
        if len(pts) != cls.point_count:
            logger.debug("%s.from_points: expected %d points, got %d",
                         cls.__name__, cls.point_count, len(pts))
            raise InvalidPointsCountError(expected=cls.point_count, got=len(pts))
        return cls(*pts, config=config)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    @abstractmethod
    def perimeter(self) -> float:
        ...

    @property
    @abstractmethod
    def area(self) -> float:
        ...

    def to_array(self) -> np.ndarray:
        """Points as an (N, 2) float array."""
        return np.array([[p.x, p.y] for p in self._points], dtype=np.float64)

    def __repr__(self) -> str:
        pts = ', '.join(f"({p.x:g}, {p.y:g})" for p in self._points)
        return f"{type(self).__name__}(name={self.name!r}, points=[{pts}])"


class Line(Shape):
    """Segment from ``start`` to ``end``.

    A degenerate line (start == end) is accepted; only ``vector`` and
    ``angle`` fail on it, with ZeroLengthVectorError.
    """

    point_count = LINE_POINTS

    def __init__(self, start: Point, end: Point, config: Optional[GeometryConfig] = None):
        cfg = config if config is not None else DEFAULT_CONFIG
        super().__init__([start, end], name=cfg.names['line'], config=cfg)

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[1]

    @property
    def vector(self) -> Vector:
        return Vector.from_points(self.start, self.end)

    @property
    def perimeter(self) -> float:
        return self.start.distance(self.end)

    @property
    def length(self) -> float:
        return self.perimeter

    @property
    def area(self) -> float:
        return 0.0

    def angle(self, other: Line) -> float:
        """Angle in degrees between the direction vectors of two lines."""
        return self.vector.angle(other.vector)


class Triangle(Shape):
    """Non-degenerate triangle with vertices ``a``, ``b``, ``c``."""

    point_count = TRIANGLE_POINTS

    def __init__(self, a: Point, b: Point, c: Point, config: Optional[GeometryConfig] = None):
        sides = (a.distance(b), b.distance(c), c.distance(a))
        s0, s1, s2 = sorted(sides)
        # sorted form covers all three permutations of the strict inequality;
        # NaN compares False, so non-finite sides are rejected explicitly
        if not all(math.isfinite(s) for s in sides) or s0 + s1 <= s2:
            logger.debug("rejecting degenerate triangle with sides %s", sides)
            raise InvalidTriangleError(sides)
        cfg = config if config is not None else DEFAULT_CONFIG
        super().__init__([a, b, c], name=cfg.names['triangle'], config=cfg)

    @property
    def a(self) -> Point:
        return self._points[0]

    @property
    def b(self) -> Point:
        return self._points[1]

    @property
    def c(self) -> Point:
        return self._points[2]

    @property
    def ab(self) -> float:
        return self.a.distance(self.b)

    @property
    def bc(self) -> float:
        return self.b.distance(self.c)

    @property
    def ca(self) -> float:
        return self.c.distance(self.a)

    @property
    def sides(self) -> Tuple[float, float, float]:
        return self.ab, self.bc, self.ca

    @property
    def angle_type(self) -> AngleType:
        return classify_angle(self.sides, tol=self.config.right_angle_tol)

    @property
    def side_type(self) -> SideType:
        return classify_sides(self.sides, rel_tol=self.config.side_rel_tol)

    @property
    def perimeter(self) -> float:
        return self.ab + self.bc + self.ca

    @property
    def area(self) -> float:
        """Heron's formula."""
        ab, bc, ca = self.sides
        s = (ab + bc + ca) / 2
        return math.sqrt(max(0.0, s * (s - ab) * (s - bc) * (s - ca)))


def describe_shape(shape: Shape) -> str:
    """One-line summary: ``"<Name>: area = <area>, perimeter = <perimeter>"``."""
    labels = shape.config.labels
    return (f"{shape.name.title()}: {labels['area']} = {shape.area}, "
            f"{labels['perimeter']} = {shape.perimeter}")
