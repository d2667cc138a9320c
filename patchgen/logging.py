"""Logging configuration for the patchgen package."""

import logging
import sys

LOGGER_NAME = "patchgen"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_MARKER = "_patchgen_handler"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the ``patchgen`` logger.

    Calling this more than once replaces the level but never stacks handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # the stream captured by an earlier handler may already be closed
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
