"""Data structures shared by the ordering and outlier algorithms."""

from vieworder.elements.types import (
    Node,
    KeyPair,
    Neighbors,
    Ordering,
    OutlierWeights,
    EdgeWeights,
)
from vieworder.elements.degree_tables import DegreeTables
from vieworder.elements.selection_step import SelectionStep

__all__ = [
    "Node",
    "KeyPair",
    "Neighbors",
    "Ordering",
    "OutlierWeights",
    "EdgeWeights",
    "DegreeTables",
    "SelectionStep",
]
