"""Demos for the euclid2d geometry toolkit.

Each module exposes a run_* function callable from Python and a module-level
__main__ guard so it can be executed via:

    python -m demos.shapes_demo
"""
from .shapes_demo import run_shapes_demo

__all__ = ['run_shapes_demo']
