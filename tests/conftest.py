# ABOUTME: Shared pytest fixtures
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_lmcp_logger():
    """Drop handlers main() attached so they don't outlive captured streams."""
    yield
    package_logger = logging.getLogger("lmcp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
