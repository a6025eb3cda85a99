"""Shared fixtures for valargs tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop sinks added by a test so later tests never write to closed streams."""
    yield
    logger.remove()
    logger.disable("valargs")
