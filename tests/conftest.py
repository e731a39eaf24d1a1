"""
Shared pytest fixtures
"""
import logging

import pytest

from urlgrab.logging_config import LOGGER_NAME, own_handlers


def _remove_own_handlers():
    logger = logging.getLogger(LOGGER_NAME)
    for handler in own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def clean_logging():
    """Remove handlers installed by setup_logging before and after a test"""
    _remove_own_handlers()
    yield
    _remove_own_handlers()
