import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any handlers a test configured so they don't outlive its streams."""
    yield
    logger.remove()
