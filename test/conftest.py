import logging

import pytest

from vieworder.config import LOGGING_CONFIG
from vieworder.logger import mfas_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=LOGGING_CONFIG["log_level"],
        format=LOGGING_CONFIG["log_format"],
    )

    # Enable the MFAS logger so the logging paths run under test
    mfas_logger.disabled = False


@pytest.fixture(autouse=True)
def clear_mfas_log():
    """Start every test with an empty trace record."""
    mfas_logger.clear()
    yield
    mfas_logger.disabled = False
