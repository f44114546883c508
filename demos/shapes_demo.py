"""Shapes demo: describe a valid triangle and line, then show validation failures.

Run from the repo root:

    python -m demos.shapes_demo
    python -m demos.shapes_demo --locale uk --plot shapes.png
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from euclid2d import (
    GeometryConfig,
    GeometryError,
    Line,
    Point,
    Triangle,
    Vector,
    configure_logging,
    describe_shape,
    get_logger,
)

log = get_logger('euclid2d.demo.shapes')

_MESSAGES = {
    'en': {
        'angle_type': 'Angle type',
        'side_type': 'Side type',
        'triangle_failed': 'Failed to create triangle',
        'line_failed': 'Failed to create line',
        'bad_triangle': 'Triangle creation error',
        'angle': 'Angle',
        'angle_failed': 'Angle computation error',
        'vector_failed': 'Vector creation error',
    },
    'uk': {
        'angle_type': 'Тип кутів',
        'side_type': 'Тип сторін',
        'triangle_failed': 'Помилка при створенні трикутника',
        'line_failed': 'Помилка при створенні лінії',
        'bad_triangle': 'Помилка створення трикутника',
        'angle': 'Кут',
        'angle_failed': 'Помилка обчислення кута',
        'vector_failed': 'Помилка створення вектора',
    },
}


def run_shapes_demo(locale: str = 'en', plot: Optional[str] = None) -> List[str]:
    """Run the demonstration, print each line and return the printed lines."""
    cfg = GeometryConfig(locale=locale)
    msg = _MESSAGES[locale]
    out: List[str] = []

    def emit(line):
        print(line)
        out.append(line)

    drawn = []
    a, b, c = Point(0, 0), Point(4, 0), Point(0, 3)

    try:
        triangle = Triangle(a, b, c, config=cfg)
    except GeometryError:
        log.debug('valid triangle rejected', exc_info=True)
        emit(msg['triangle_failed'])
    else:
        drawn.append(triangle)
        emit(describe_shape(triangle))
        emit(f"{msg['angle_type']}: {triangle.angle_type.value}")
        emit(f"{msg['side_type']}: {triangle.side_type.value}")

    try:
        line = Line(a, b, config=cfg)
    except GeometryError:
        log.debug('line rejected', exc_info=True)
        emit(msg['line_failed'])
    else:
        drawn.append(line)
        emit(describe_shape(line))

    # (1,1) repeated: coincident points cannot form a triangle
    p1, p2, p3 = Point(0, 0), Point(1, 1), Point(1, 1)
    try:
        bad_triangle = Triangle(p1, p2, p3, config=cfg)
        emit(describe_shape(bad_triangle))
    except GeometryError as exc:
        emit(f"{msg['bad_triangle']}: {exc}")

    same = Point(0, 0)
    try:
        v1 = Vector.from_points(same, same)
        v2 = Vector.from_points(same, same)
    except GeometryError as exc:
        emit(f"{msg['vector_failed']}: {exc}")
    else:
        try:
            emit(f"{msg['angle']}: {v1.angle(v2)}")
        except GeometryError as exc:
            emit(f"{msg['angle_failed']}: {exc}")

    if plot:
        from euclid2d.core.visualization import plot_shapes
        plot_shapes(drawn, outname=plot)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description='Describe a triangle and a line, then show validation failures')
    ap.add_argument('--locale', type=str, choices=sorted(_MESSAGES), default='en',
                    help='language for shape names and messages')
    ap.add_argument('--plot', type=str, default=None, help='write a figure of the valid shapes to this path')
    ap.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                    default='WARNING')
    args = ap.parse_args(argv)

    configure_logging(getattr(logging, args.log_level.upper(), logging.WARNING))
    run_shapes_demo(locale=args.locale, plot=args.plot)
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
