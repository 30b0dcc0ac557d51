"""Value object describing one round of the greedy selection loop."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from vieworder.elements.types import Node


@dataclass(frozen=True)
class SelectionStep:
    """
    Immutable record of a single node selection.

    Passed to the optional trace hook of ``mfas_ratio`` once per round, in
    position order.

    Attributes:
        node: The node chosen in this round
        position: Position assigned to the node (0-based)
        in_degree: Remaining weighted in-degree at selection time
        out_degree: Remaining weighted out-degree at selection time
        score: Smoothed out/in ratio, or None when picked as a source
    """

    node: Node
    position: int
    in_degree: float
    out_degree: float
    score: Optional[float] = None

    @property
    def is_source(self) -> bool:
        """True when the node was picked because its in-degree vanished."""
        return self.score is None

    def __str__(self) -> str:
        reason = "source" if self.is_source else f"score={self.score:.6g}"
        return (
            f"#{self.position}: {self.node!r} "
            f"(in={self.in_degree:.6g}, out={self.out_degree:.6g}, {reason})"
        )
