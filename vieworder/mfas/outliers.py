"""Classification of edges against a computed ordering."""

from __future__ import annotations
from typing import Sequence

from vieworder.elements.types import KeyPair, Ordering, OutlierWeights
from vieworder.exceptions import MissingNodeError
from vieworder.mfas.logging_helpers import log_outliers
from vieworder.mfas.validation import check_aligned


def _position(ordering: Ordering, node) -> int:
    try:
        return ordering[node]
    except KeyError:
        MissingNodeError.raise_missing_node(node, "ordering")


def is_consistent(edge: KeyPair, weight: float, ordering: Ordering) -> bool:
    """Return True when ``edge`` with signed ``weight`` agrees with ``ordering``.

    A positive weight must point forward, a negative weight backward. Zero
    weights and self-loops are always consistent.
    """
    source, target = edge
    delta = _position(ordering, target) - _position(ordering, source)
    return delta * weight >= 0


def outlier_weights(
    edges: Sequence[KeyPair], weights: Sequence[float], ordering: Ordering
) -> OutlierWeights:
    """
    Accumulate ``|w|`` for every edge that disagrees with ``ordering``.

    Args:
        edges: Directed (source, target) pairs
        weights: Signed or normalized weights, index-aligned with edges
        ordering: Complete ordering covering every edge endpoint

    Returns:
        Mapping from inconsistent edge to the sum of its weight magnitudes.
        Consistent edges are absent.

    Raises:
        InvalidArgumentError: If edges and weights differ in length
        MissingNodeError: If an endpoint has no position in ``ordering``
    """
    check_aligned(edges, weights)
    result: OutlierWeights = {}
    for (source, target), weight in zip(edges, weights):
        key = (source, target)
        if not is_consistent(key, weight, ordering):
            result[key] = result.get(key, 0.0) + abs(weight)
    log_outliers(edges, result)
    return result
