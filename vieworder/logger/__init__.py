"""Logging package for vieworder."""

from vieworder.logger.base_logger import AlgorithmLogger
from vieworder.logger.table_logger import TableLogger
from vieworder.logger.combined_logger import Logger
from vieworder.logger.formatting import (
    format_node,
    format_edge,
    format_neighbors,
    format_ordering,
)

# Unified singleton for algorithm tracing
mfas_logger = Logger("ViewOrder")
mfas_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "Logger",
    "mfas_logger",
    "format_node",
    "format_edge",
    "format_neighbors",
    "format_ordering",
]
