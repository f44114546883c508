import logging
import sys

import pytest

from euclid2d.core.config import DEFAULT_CONFIG, GeometryConfig
from euclid2d.core.constants import EPS_RIGHT_ANGLE, EPS_SIDE_EQUAL
from euclid2d.core.logging_utils import configure_logging, get_logger


def test_default_config():
    assert DEFAULT_CONFIG.right_angle_tol == EPS_RIGHT_ANGLE
    assert DEFAULT_CONFIG.side_rel_tol == EPS_SIDE_EQUAL
    assert DEFAULT_CONFIG.locale == 'en'
    assert DEFAULT_CONFIG.names['triangle'] == 'triangle'
    assert DEFAULT_CONFIG.labels['area'] == 'area'


def test_unknown_locale_rejected():
    with pytest.raises(ValueError, match="Unsupported locale"):
        GeometryConfig(locale='fr')


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError):
        GeometryConfig(right_angle_tol=-1.0)


def test_configure_logging_isolated_from_root():
    configure_logging('DEBUG')
    pkg = logging.getLogger('euclid2d')
    assert pkg.level == logging.DEBUG
    assert pkg.propagate is False
    stream_handlers = [h for h in pkg.handlers if not isinstance(h, logging.NullHandler)]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].stream is sys.stdout
    # repeated calls do not stack handlers
    configure_logging('WARNING')
    assert len(pkg.handlers) == 1
    assert pkg.level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info():
    configure_logging('CHATTY')
    assert logging.getLogger('euclid2d').level == logging.INFO


def test_get_logger_inherits_by_default():
    log = get_logger('euclid2d.test_child')
    assert log.level == logging.NOTSET
    log = get_logger('euclid2d.test_child', level='ERROR')
    assert log.level == logging.ERROR
