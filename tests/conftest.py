import logging

import pytest


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("cartshop")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
