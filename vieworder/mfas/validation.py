"""Input checks shared by the normalization, ordering and outlier steps."""

import math
from typing import Sequence, Set

from vieworder.elements.types import KeyPair, Node
from vieworder.exceptions import InvalidArgumentError, MissingNodeError


def check_aligned(edges: Sequence[KeyPair], weights: Sequence[float]) -> None:
    """Raise InvalidArgumentError unless edges and weights are equal-length
    and every weight is finite."""
    if len(edges) != len(weights):
        InvalidArgumentError.raise_misaligned(len(edges), len(weights))
    check_finite_weights(weights)


def check_finite_weights(weights: Sequence[float]) -> None:
    """Raise InvalidArgumentError for a NaN or infinite weight."""
    for index, weight in enumerate(weights):
        if not math.isfinite(weight):
            raise InvalidArgumentError(
                f"Weight at index {index} is not finite: {weight!r}"
            )


def check_unique_nodes(nodes: Sequence[Node]) -> Set[Node]:
    """Return the node set, raising InvalidArgumentError on duplicates."""
    node_set = set(nodes)
    if len(node_set) != len(nodes):
        seen: Set[Node] = set()
        duplicates = []
        for node in nodes:
            if node in seen:
                duplicates.append(node)
            seen.add(node)
        raise InvalidArgumentError(
            f"Node set contains duplicate identifiers: {duplicates!r}"
        )
    return node_set


def check_endpoints(edges: Sequence[KeyPair], node_set: Set[Node]) -> None:
    """Raise MissingNodeError for the first edge endpoint outside node_set."""
    for source, target in edges:
        if source not in node_set:
            MissingNodeError.raise_missing_node(source, "node set")
        if target not in node_set:
            MissingNodeError.raise_missing_node(target, "node set")
