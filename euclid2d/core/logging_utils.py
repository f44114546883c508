"""Logging utilities for euclid2d.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All euclid2d code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'euclid2d'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'euclid2d' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'euclid2d' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # NullHandlers added by the package __init__ would swallow output
    for h in list(pkg_root.handlers):
        if isinstance(h, logging.NullHandler):
            pkg_root.removeHandler(h)
    if not pkg_root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    lvl = getattr(logging, str(level).upper(), None)
    return lvl if isinstance(lvl, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'euclid2d' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'euclid2d' namespace.

    Without a level the logger is left at NOTSET so it inherits from the
    'euclid2d' parent configured via configure_logging().
    """
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
