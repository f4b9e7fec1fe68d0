import logging

import pytest

from motor_calculator import configure_logging


@pytest.fixture()
def package_logger():
    logger = logging.getLogger('motor_calculator')
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_null_handler_installed(package_logger):
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_configure_logging_once(package_logger):
    logger = configure_logging(logging.DEBUG)
    configure_logging(logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1
