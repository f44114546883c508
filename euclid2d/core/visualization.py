"""Plotting helpers for shapes."""
from __future__ import annotations

import os as _os
from typing import Iterable

import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt

from .logging_utils import get_logger
from .shapes import Shape, Triangle, describe_shape

logger = get_logger('euclid2d.viz')

__all__ = ['plot_shapes']


def plot_shapes(shapes: Iterable[Shape], outname: str = "shapes.png",
                annotate: bool = True, title: str = None) -> str:
    """Draw shapes on one set of axes and save the figure.

    Args:
        shapes: Line / Triangle instances
        outname: output image path
        annotate: if True, label each shape with describe_shape() at its centroid
        title: optional figure title

    Returns the output path.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        ax.set_aspect('equal')
        for shape in shapes:
            pts = shape.to_array()
            if isinstance(shape, Triangle):
                closed = list(pts) + [pts[0]]
                xs = [p[0] for p in closed]
                ys = [p[1] for p in closed]
                ax.fill(xs, ys, alpha=0.25)
                ax.plot(xs, ys, linewidth=1.5)
            else:
                ax.plot(pts[:, 0], pts[:, 1], linewidth=1.5, marker='o')
            if annotate:
                cx, cy = pts.mean(axis=0)
                ax.annotate(describe_shape(shape), (cx, cy), fontsize=8, ha='center')
        if title:
            ax.set_title(title)
        ax.grid(True, linewidth=0.3)
        fig.savefig(outname, dpi=120, bbox_inches='tight')
    finally:
        plt.close(fig)
    logger.info("Wrote %s", outname)
    return outname
