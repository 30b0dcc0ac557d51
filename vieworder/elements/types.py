"""Type aliases shared by the ordering and outlier modules."""

from typing import Dict, Hashable, List, Tuple

Node = Hashable
KeyPair = Tuple[Node, Node]
Neighbors = List[Tuple[Node, float]]

Ordering = Dict[Node, int]
OutlierWeights = Dict[KeyPair, float]
EdgeWeights = Dict[KeyPair, float]
