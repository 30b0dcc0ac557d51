"""Per-call degree and adjacency bookkeeping for the greedy ordering."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from vieworder.elements.types import Neighbors, Node


@dataclass
class DegreeTables:
    """
    Weighted in/out degrees and adjacency lists of a directed view-graph.

    Every node of the graph has an entry in all four maps, including nodes
    without incident edges. Degrees are mutated by the selection loop and are
    never clamped, so they can drift slightly below zero.

    Attributes:
        in_degree: Sum of incoming edge weights per node
        out_degree: Sum of outgoing edge weights per node
        in_neighbors: (predecessor, weight) pairs per node, in edge order
        out_neighbors: (successor, weight) pairs per node, in edge order
    """

    in_degree: Dict[Node, float] = field(default_factory=dict)
    out_degree: Dict[Node, float] = field(default_factory=dict)
    in_neighbors: Dict[Node, Neighbors] = field(default_factory=dict)
    out_neighbors: Dict[Node, Neighbors] = field(default_factory=dict)

    def add_node(self, node: Node) -> None:
        self.in_degree[node] = 0.0
        self.out_degree[node] = 0.0
        self.in_neighbors[node] = []
        self.out_neighbors[node] = []

    def add_edge(self, source: Node, target: Node, weight: float) -> None:
        self.in_degree[target] += weight
        self.out_degree[source] += weight
        self.in_neighbors[target].append((source, weight))
        self.out_neighbors[source].append((target, weight))

    def rows(self) -> List[Tuple[Node, float, float, Neighbors, Neighbors]]:
        """Return one (node, in, out, in_nbrs, out_nbrs) row per node."""
        return [
            (
                node,
                self.in_degree[node],
                self.out_degree[node],
                self.in_neighbors[node],
                self.out_neighbors[node],
            )
            for node in self.in_degree
        ]
