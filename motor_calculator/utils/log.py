"""Logging helpers for scripts using the package."""

import logging

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it twice does not duplicate the handler.

    Args:
        level: Logging level for the package logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger('motor_calculator')
    logger.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
