"""Public package API for the euclid2d geometry toolkit.

This facade provides a flat import surface on top of the implementation
package ``euclid2d.core``. Plotting (``euclid2d.core.visualization``) pulls in
matplotlib and is not imported here.

Example
-------
    from euclid2d import Point, Triangle, describe_shape

    tri = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    describe_shape(tri)   # 'Triangle: area = 6.0, perimeter = 12.0'
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("euclid2d")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import EPS_RIGHT_ANGLE, EPS_SIDE_EQUAL
from .core.errors import (
    GeometryError,
    InvalidPointsCountError,
    ZeroLengthVectorError,
    InvalidTriangleError,
    InvalidQuadrilateralError,
)
from .core.config import GeometryConfig, DEFAULT_CONFIG
from .core.logging_utils import configure_logging, get_logger
from .core.primitives import Point, Vector
from .core.classification import AngleType, SideType, classify_angle, classify_sides
from .core.shapes import Shape, Line, Triangle, describe_shape
from .core import constants, errors, primitives, classification, shapes

__all__ = [
    '__version__',
    # primitives
    'Point', 'Vector',
    # shapes
    'Shape', 'Line', 'Triangle', 'describe_shape',
    # classification
    'AngleType', 'SideType', 'classify_angle', 'classify_sides',
    # errors
    'GeometryError', 'InvalidPointsCountError', 'ZeroLengthVectorError',
    'InvalidTriangleError', 'InvalidQuadrilateralError',
    # configuration / logging
    'GeometryConfig', 'DEFAULT_CONFIG', 'configure_logging', 'get_logger',
    'EPS_RIGHT_ANGLE', 'EPS_SIDE_EQUAL',
    # submodules
    'constants', 'errors', 'primitives', 'classification', 'shapes',
]
