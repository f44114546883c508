"""Triangle classification by largest angle and by side-length pattern.

Both helpers are pure functions of the three side lengths so they can be used
without constructing a ``Triangle``.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

from .constants import EPS_RIGHT_ANGLE, EPS_SIDE_EQUAL

__all__ = ['AngleType', 'SideType', 'classify_angle', 'classify_sides']


class AngleType(str, Enum):
    ACUTE = 'acute'
    RIGHT = 'right'
    OBTUSE = 'obtuse'


class SideType(str, Enum):
    EQUILATERAL = 'equilateral'
    ISOSCELES = 'isosceles'
    SCALENE = 'scalene'


def _three(sides: Sequence[float]):
    if len(sides) != 3:
        raise ValueError(f"Expected 3 side lengths, got {len(sides)}")
    return float(sides[0]), float(sides[1]), float(sides[2])


def classify_angle(sides: Sequence[float], tol: float = EPS_RIGHT_ANGLE) -> AngleType:
    """Classify a triangle by its largest angle.

    Parameters
    ----------
    sides : sequence of 3 floats
        Side lengths in any order.
    tol : float
        Absolute tolerance on ``a^2 + b^2 - c^2`` for the right-angle case.

    Returns
    -------
    AngleType
        ACUTE when ``a^2 + b^2 > c^2`` (tested first, so a value barely above
        the right-angle boundary is acute), RIGHT when within ``tol`` below
        it, OBTUSE otherwise.
    """
    a, b, c = sorted(_three(sides))
    a2, b2, c2 = a * a, b * b, c * c
    if a2 + b2 > c2:
        return AngleType.ACUTE
    if abs(a2 + b2 - c2) < tol:
        return AngleType.RIGHT
    return AngleType.OBTUSE


def classify_sides(sides: Sequence[float], rel_tol: float = EPS_SIDE_EQUAL) -> SideType:
    """Classify a triangle by how many of its sides are equal.

    ``rel_tol=0`` compares lengths exactly.
    """
    ab, bc, ca = _three(sides)

    def eq(u, v):
        return math.isclose(u, v, rel_tol=rel_tol, abs_tol=0.0)

    if eq(ab, bc) and eq(bc, ca):
        return SideType.EQUILATERAL
    if eq(ab, bc) or eq(bc, ca) or eq(ca, ab):
        return SideType.ISOSCELES
    return SideType.SCALENE
