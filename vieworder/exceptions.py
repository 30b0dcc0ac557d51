"""
Custom exceptions for view-graph ordering and outlier detection.
"""

from __future__ import annotations
from typing import Hashable, NoReturn


class ViewOrderError(Exception):
    """Base exception for view ordering errors."""

    pass


class InvalidArgumentError(ViewOrderError, ValueError):
    """Raised when inputs are malformed, e.g. edges and weights differ in length."""

    @staticmethod
    def raise_misaligned(num_edges: int, num_weights: int) -> NoReturn:
        """Raise for edge and weight collections that are not index-aligned."""
        from vieworder.logger import mfas_logger

        message = (
            f"Edges and weights must be index-aligned: got {num_edges} edges "
            f"and {num_weights} weights."
        )
        if not mfas_logger.disabled:
            mfas_logger.error(message)
        raise InvalidArgumentError(message)


class MissingNodeError(ViewOrderError, KeyError):
    """Raised when an edge endpoint is absent from the node set or the ordering."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""

    @staticmethod
    def raise_missing_node(node: Hashable, where: str) -> NoReturn:
        """
        Raises a MissingNodeError for an edge endpoint that cannot be found.

        Args:
            node: The node identifier that could not be found
            where: Name of the structure it is missing from ("node set", "ordering")

        Raises:
            MissingNodeError: Always raised with the node and location
        """
        from vieworder.logger import mfas_logger

        message = f"Edge endpoint {node!r} is missing from the {where}."
        if not mfas_logger.disabled:
            mfas_logger.error(message)
        raise MissingNodeError(message)
