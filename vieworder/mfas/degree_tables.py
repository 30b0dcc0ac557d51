"""Construction of the weighted degree tables consumed by the greedy loop."""

from typing import Sequence

from vieworder.elements.degree_tables import DegreeTables
from vieworder.elements.types import KeyPair, Node
from vieworder.mfas.validation import (
    check_aligned,
    check_endpoints,
    check_unique_nodes,
)


def build_degree_tables(
    edges: Sequence[KeyPair], weights: Sequence[float], nodes: Sequence[Node]
) -> DegreeTables:
    """
    Aggregate weighted in/out degrees and adjacency lists.

    Nodes are registered in the given order so that isolated nodes are
    present with zero degree. Weights are summed in edge order, which keeps
    the floating-point result reproducible when an edge key repeats.

    Raises:
        InvalidArgumentError: Misaligned inputs or duplicate nodes
        MissingNodeError: An edge endpoint is not in ``nodes``
    """
    check_aligned(edges, weights)
    node_set = check_unique_nodes(nodes)
    check_endpoints(edges, node_set)

    tables = DegreeTables()
    for node in nodes:
        tables.add_node(node)
    for (source, target), weight in zip(edges, weights):
        tables.add_edge(source, target, weight)
    return tables
