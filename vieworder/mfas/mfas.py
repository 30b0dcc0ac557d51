"""Edge-keyed facade over the ordering and outlier functions.

Downstream stages hold measurements as a mapping from edge to signed
weight. ``MFAS`` keeps that mapping, normalizes signs only for the ordering
step and classifies the given signed weights against the result.
"""

from __future__ import annotations
from typing import List, Mapping, Optional, Sequence

import numpy as np

from vieworder.elements.types import EdgeWeights, KeyPair, Node, Ordering, OutlierWeights
from vieworder.mfas.normalization import flip_negative_edges
from vieworder.mfas.ordering import TraceHook, mfas_ratio
from vieworder.mfas.outliers import outlier_weights


def nodes_from_edges(edges: Sequence[KeyPair]) -> List[Node]:
    """Return edge endpoints in order of first appearance."""
    seen = {}
    for source, target in edges:
        seen.setdefault(source, None)
        seen.setdefault(target, None)
    return list(seen)


class MFAS:
    """
    Minimum feedback arc set ordering of a weighted view-graph.

    Attributes:
        edge_weights: Signed weight per directed edge, as given
        nodes: Node iteration order used for tie-breaks
    """

    def __init__(
        self, edge_weights: Mapping[KeyPair, float], nodes: Optional[Sequence[Node]] = None
    ):
        self.edge_weights: EdgeWeights = {
            (source, target): float(weight)
            for (source, target), weight in edge_weights.items()
        }
        if nodes is None:
            nodes = nodes_from_edges(list(self.edge_weights))
        self.nodes: List[Node] = list(nodes)

    @classmethod
    def from_translation_projection(
        cls,
        relative_translations: Mapping[KeyPair, np.ndarray],
        direction: np.ndarray,
        nodes: Optional[Sequence[Node]] = None,
    ) -> "MFAS":
        """Build from relative translation directions projected on ``direction``.

        The weight of edge (i, j) is the dot product of the unit translation
        from i to j with the projection direction.
        """
        from vieworder.mfas.translation_projection import projection_weights

        return cls(projection_weights(relative_translations, direction), nodes)

    @property
    def edges(self) -> List[KeyPair]:
        return list(self.edge_weights.keys())

    @property
    def weights(self) -> List[float]:
        return list(self.edge_weights.values())

    def compute_ordering(self, trace: Optional[TraceHook] = None) -> Ordering:
        """Normalize edge signs and run the greedy ratio ordering."""
        edges, weights = flip_negative_edges(self.edges, self.weights)
        return mfas_ratio(edges, weights, self.nodes, trace=trace)

    def compute_outlier_weights(
        self, ordering: Optional[Ordering] = None
    ) -> OutlierWeights:
        """Classify the signed edge weights against ``ordering``.

        The ordering is computed when not supplied.
        """
        if ordering is None:
            ordering = self.compute_ordering()
        return outlier_weights(self.edges, self.weights, ordering)

    def __len__(self) -> int:
        return len(self.edge_weights)

    def __repr__(self) -> str:
        return f"MFAS(nodes={len(self.nodes)}, edges={len(self.edge_weights)})"
