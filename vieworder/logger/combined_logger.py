"""Combined logger with all functionality."""

from vieworder.logger.base_logger import AlgorithmLogger
from vieworder.logger.table_logger import TableLogger
import logging

from vieworder.config import LOGGING_CONFIG


class Logger(TableLogger):
    """
    Combined logger used by the ordering and outlier algorithms.

    Usage:
        logger = Logger("my_algorithm")
        logger.section("Phase 1")
        logger.info("Starting phase 1...")
        logger.table(data, headers=["col1", "col2"])
    """

    def __init__(self, name: str):
        """Initialize the combined logger."""
        AlgorithmLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable logging to the console."""
        self.disabled = False
        if not any(isinstance(h, logging.StreamHandler) for h in self.logger.handlers):
            handler = logging.StreamHandler()
            formatter = logging.Formatter(LOGGING_CONFIG["log_format"])
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(level)
