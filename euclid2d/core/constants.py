"""Central numerical tolerances and small geometry constants.

Tolerances used by the classification helpers live here so they can be tuned
consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Classification tolerances
EPS_RIGHT_ANGLE: float = 1e-4     # absolute |a^2 + b^2 - c^2| for a right triangle
EPS_SIDE_EQUAL: float = 1e-9      # relative tolerance for equal side lengths

# Point counts per shape variant
LINE_POINTS: int = 2
TRIANGLE_POINTS: int = 3

DEFAULT_LOCALE: str = 'en'

# Display names and describe_shape labels per locale
SHAPE_NAMES = {
    'en': {'unknown': 'unknown', 'line': 'line', 'triangle': 'triangle'},
    'uk': {'unknown': 'невідома', 'line': 'лінія', 'triangle': 'трикутник'},
}
DESCRIBE_LABELS = {
    'en': {'area': 'area', 'perimeter': 'perimeter'},
    'uk': {'area': 'площа', 'perimeter': 'периметр'},
}

__all__ = [
    'EPS_RIGHT_ANGLE',
    'EPS_SIDE_EQUAL',
    'LINE_POINTS',
    'TRIANGLE_POINTS',
    'DEFAULT_LOCALE',
    'SHAPE_NAMES',
    'DESCRIBE_LABELS',
]
