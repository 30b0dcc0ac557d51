"""Sign normalization of weighted edges.

A negative weight on ``(u, v)`` carries the same information as the positive
weight on ``(v, u)``. Normalizing before ordering lets the greedy loop treat
every weight as a non-negative confidence.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from vieworder.elements.types import EdgeWeights, KeyPair
from vieworder.mfas.validation import check_aligned


def flip_negative_edges(
    edges: Sequence[KeyPair], weights: Sequence[float]
) -> Tuple[List[KeyPair], List[float]]:
    """Reverse every negatively weighted edge and negate its weight.

    Args:
        edges: Directed (source, target) pairs
        weights: Signed weights, index-aligned with edges

    Returns:
        New aligned (edges, weights) lists with all weights >= 0. The inputs
        are not modified.

    Raises:
        InvalidArgumentError: If edges and weights differ in length
    """
    check_aligned(edges, weights)
    flipped_edges: List[KeyPair] = []
    flipped_weights: List[float] = []
    for (source, target), weight in zip(edges, weights):
        if weight < 0.0:
            flipped_edges.append((target, source))
            flipped_weights.append(-weight)
        else:
            flipped_edges.append((source, target))
            flipped_weights.append(weight)
    return flipped_edges, flipped_weights


def flip_negative_edge_weights(edge_weights: EdgeWeights) -> EdgeWeights:
    """Edge-keyed variant of flip_negative_edges.

    When a flipped edge lands on a key that is already present, magnitudes
    are summed in input order.
    """
    edges = list(edge_weights.keys())
    weights = list(edge_weights.values())
    flipped: EdgeWeights = {}
    for edge, weight in zip(*flip_negative_edges(edges, weights)):
        flipped[edge] = flipped.get(edge, 0.0) + weight
    return flipped
