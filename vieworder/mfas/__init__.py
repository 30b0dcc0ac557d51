"""Minimum feedback arc set ordering and outlier detection for view-graphs."""

from vieworder.mfas.normalization import (
    flip_negative_edges,
    flip_negative_edge_weights,
)
from vieworder.mfas.degree_tables import build_degree_tables
from vieworder.mfas.ordering import (
    TraceHook,
    ratio_score,
    select_next_node,
    remove_node,
    mfas_ratio,
)
from vieworder.mfas.outliers import is_consistent, outlier_weights
from vieworder.mfas.logging_helpers import log_selection_step
from vieworder.mfas.mfas import MFAS, nodes_from_edges
from vieworder.mfas.translation_projection import (
    OutlierRejectionResult,
    normalize_translations,
    projection_weights,
    sample_projection_directions,
    filter_translation_outliers,
)

__all__ = [
    "flip_negative_edges",
    "flip_negative_edge_weights",
    "build_degree_tables",
    "TraceHook",
    "ratio_score",
    "select_next_node",
    "remove_node",
    "mfas_ratio",
    "is_consistent",
    "outlier_weights",
    "log_selection_step",
    "MFAS",
    "nodes_from_edges",
    "OutlierRejectionResult",
    "normalize_translations",
    "projection_weights",
    "sample_projection_directions",
    "filter_translation_outliers",
]
