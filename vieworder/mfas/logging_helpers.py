"""
Logging Helpers for the MFAS Ordering
-------------------------------------
Dedicated logging functions for the ordering and outlier modules. They are
no-ops while ``mfas_logger`` is disabled.
"""

from typing import Sequence

from vieworder.elements.degree_tables import DegreeTables
from vieworder.elements.selection_step import SelectionStep
from vieworder.elements.types import KeyPair, Ordering, OutlierWeights
from vieworder.logger import (
    mfas_logger,
    format_edge,
    format_neighbors,
    format_node,
    format_ordering,
)


def log_degree_tables(tables: DegreeTables) -> None:
    """Log the initial per-node degree and adjacency table."""
    if mfas_logger.disabled:
        return
    rows = [
        [
            format_node(node),
            in_deg,
            out_deg,
            format_neighbors(in_nbrs),
            format_neighbors(out_nbrs),
        ]
        for node, in_deg, out_deg, in_nbrs, out_nbrs in tables.rows()
    ]
    mfas_logger.table(
        rows,
        headers=["node", "in", "out", "predecessors", "successors"],
        title="Initial weighted degrees",
    )


def log_selection_step(step: SelectionStep) -> None:
    """Trace hook for ``mfas_ratio`` that writes each choice to the log."""
    mfas_logger.info(f"choice is {step}")


def log_ordering_result(ordering: Ordering) -> None:
    mfas_logger.result("Ordering", format_ordering(ordering))


def log_outliers(
    edges: Sequence[KeyPair], outlier_weights: OutlierWeights
) -> None:
    """Log a summary table of the flagged edges."""
    if mfas_logger.disabled:
        return
    mfas_logger.info(
        f"Flagged {len(outlier_weights)} of {len(edges)} edges as outliers"
    )
    if outlier_weights:
        rows = [[format_edge(edge), w] for edge, w in outlier_weights.items()]
        mfas_logger.table(rows, headers=["edge", "outlier weight"])
