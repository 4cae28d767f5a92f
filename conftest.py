"""Root conftest for all tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test; they may point at a captured stream that is now closed."""
    yield
    logger.remove()
