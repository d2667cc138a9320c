import logging

import pytest


@pytest.fixture(autouse=True)
def restore_patchgen_logger():
    """Undo setup_logging() side effects so each test starts from a clean logger."""
    logger = logging.getLogger("patchgen")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
