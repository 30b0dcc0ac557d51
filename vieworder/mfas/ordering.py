"""Greedy ratio heuristic for the Minimum Feedback Arc Set problem.

Nodes are peeled off one at a time. A node whose remaining weighted
in-degree has vanished is a source and is placed immediately; otherwise the
node with the largest smoothed out/in ratio goes next. Placing a node removes
its edges from the degree bookkeeping of its neighbours. The result is a
total order whose backward edges approximate a minimum-weight feedback arc
set; it is not optimal in general.

Reference: K. Wilson and N. Snavely, "Robust Global Translations with 1DSfM",
ECCV 2014.
"""

from __future__ import annotations
from typing import Callable, Optional, Sequence, Tuple

from vieworder.config import LAPLACE_SMOOTHING, SOURCE_TOLERANCE
from vieworder.elements.degree_tables import DegreeTables
from vieworder.elements.selection_step import SelectionStep
from vieworder.elements.types import KeyPair, Node, Ordering
from vieworder.logger import mfas_logger
from vieworder.mfas.degree_tables import build_degree_tables
from vieworder.mfas.logging_helpers import log_degree_tables, log_ordering_result

__all__ = [
    "TraceHook",
    "ratio_score",
    "select_next_node",
    "remove_node",
    "mfas_ratio",
]

TraceHook = Callable[[SelectionStep], None]


def ratio_score(in_degree: float, out_degree: float) -> float:
    """Laplace-smoothed out/in ratio used to rank non-source nodes."""
    return (out_degree + LAPLACE_SMOOTHING) / (in_degree + LAPLACE_SMOOTHING)


def select_next_node(
    nodes: Sequence[Node],
    ordering: Ordering,
    tables: DegreeTables,
    tolerance: float = SOURCE_TOLERANCE,
) -> Tuple[Node, Optional[float]]:
    """Choose the next node to place.

    Scans unordered nodes in ``nodes`` order. The first node with in-degree
    below ``tolerance`` is returned at once with score None. Otherwise the
    first node reaching the strict maximum ratio score wins.

    Raises:
        ValueError: If every node is already ordered
    """
    best_node: Optional[Node] = None
    best_score = float("-inf")
    found = False
    for node in nodes:
        if node in ordering:
            continue
        in_degree = tables.in_degree[node]
        # Negative drift also counts as a source.
        if in_degree < tolerance:
            return node, None
        score = ratio_score(in_degree, tables.out_degree[node])
        if score > best_score:
            best_score = score
            best_node = node
            found = True
    if not found:
        raise ValueError("select_next_node called with every node already ordered")
    return best_node, best_score


def remove_node(node: Node, tables: DegreeTables) -> None:
    """Remove the influence of a placed node from its neighbours' degrees.

    Predecessors lose the edge weight from their out-degree and successors
    from their in-degree. Degrees are not clamped at zero. A self-loop only
    adjusts the placed node itself, which is no longer scored.
    """
    for predecessor, weight in tables.in_neighbors[node]:
        tables.out_degree[predecessor] -= weight
    for successor, weight in tables.out_neighbors[node]:
        tables.in_degree[successor] -= weight


def mfas_ratio(
    edges: Sequence[KeyPair],
    weights: Sequence[float],
    nodes: Sequence[Node],
    trace: Optional[TraceHook] = None,
    tolerance: float = SOURCE_TOLERANCE,
) -> Ordering:
    """
    Compute a greedy MFAS ordering of ``nodes``.

    Args:
        edges: Directed (source, target) pairs; weights should be normalized
            with ``flip_negative_edges`` first
        weights: Non-negative weights, index-aligned with edges
        nodes: Every node to order. Iteration order is the tie-break.
        trace: Optional callable invoked with a SelectionStep per round
        tolerance: In-degree threshold below which a node counts as a source

    Returns:
        Mapping from node to position, a bijection onto range(len(nodes))

    Raises:
        InvalidArgumentError: Misaligned inputs, non-finite weights or
            duplicate nodes
        MissingNodeError: An edge endpoint is not in ``nodes``
    """
    nodes = list(nodes)
    ordering: Ordering = {}
    tables = build_degree_tables(edges, weights, nodes)
    if len(nodes) == 0:
        return ordering
    log_degree_tables(tables)

    position = 0
    while position < len(nodes):
        choice, score = select_next_node(nodes, ordering, tables, tolerance)
        if trace is not None:
            trace(
                SelectionStep(
                    node=choice,
                    position=position,
                    in_degree=tables.in_degree[choice],
                    out_degree=tables.out_degree[choice],
                    score=score,
                )
            )
        remove_node(choice, tables)
        ordering[choice] = position
        position += 1

    if not mfas_logger.disabled:
        log_ordering_result(ordering)
    return ordering
