"""Pytest fixtures for the tagjson test suite."""

import pytest
from loguru import logger


# ============================================================================
# LOGGING FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_logger():
    """
    Restore loguru to its post-import state after each test.

    The demo entry point removes the default handler and enables the
    tagjson logger; undo both so tests stay independent.
    """
    yield
    logger.remove()
    logger.disable("tagjson")
