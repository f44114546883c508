"""Configuration object for shape classification and display names."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .constants import (
    EPS_RIGHT_ANGLE,
    EPS_SIDE_EQUAL,
    DEFAULT_LOCALE,
    SHAPE_NAMES,
    DESCRIBE_LABELS,
)


@dataclass
class GeometryConfig:
    """Tolerances and locale used by shape queries.

    Attributes
    ----------
    right_angle_tol : float
        Absolute tolerance on ``a^2 + b^2 - c^2`` for a right triangle.
    side_rel_tol : float
        Relative tolerance for equal side lengths; 0 means exact comparison.
    locale : str
        Key into the name/label tables (``'en'`` or ``'uk'``).
    """
    right_angle_tol: float = EPS_RIGHT_ANGLE
    side_rel_tol: float = EPS_SIDE_EQUAL
    locale: str = DEFAULT_LOCALE

    def __post_init__(self):
        if self.locale not in SHAPE_NAMES:
            raise ValueError(
                f"Unsupported locale {self.locale!r}; expected one of {sorted(SHAPE_NAMES)}"
            )
        if self.right_angle_tol < 0 or self.side_rel_tol < 0:
            raise ValueError("Tolerances must be non-negative")

    @property
    def names(self) -> Dict[str, str]:
        return SHAPE_NAMES[self.locale]

    @property
    def labels(self) -> Dict[str, str]:
        return DESCRIBE_LABELS[self.locale]


DEFAULT_CONFIG = GeometryConfig()

__all__ = ['GeometryConfig', 'DEFAULT_CONFIG']
