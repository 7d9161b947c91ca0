from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_fieldpart_logger():
    """Restore the ``fieldpart`` logger so CLI runs do not leak stream handlers."""

    logger = logging.getLogger("fieldpart")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    logger.setLevel(level)
