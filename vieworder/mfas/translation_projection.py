"""Projection-based outlier rejection for relative translation directions.

Each relative translation direction is projected onto a set of random unit
vectors. Every projection yields a signed 1D ordering problem; MFAS orders
the views and flags the edges that contradict the order. Edges whose mean
outlier weight over all projections stays below a threshold are inliers.

Reference: K. Wilson and N. Snavely, "Robust Global Translations with 1DSfM",
ECCV 2014.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Set

import numpy as np

from vieworder.config import OutlierRejectionConfig
from vieworder.elements.types import EdgeWeights, KeyPair, Node, OutlierWeights
from vieworder.exceptions import InvalidArgumentError
from vieworder.logger import mfas_logger, format_edge
from vieworder.mfas.mfas import MFAS, nodes_from_edges

__all__ = [
    "OutlierRejectionResult",
    "normalize_translations",
    "projection_weights",
    "sample_projection_directions",
    "filter_translation_outliers",
]


@dataclass
class OutlierRejectionResult:
    """Outcome of projection-based outlier rejection.

    Attributes:
        mean_outlier_weights: Accumulated outlier weight per edge divided by
            the number of projections; every input edge has an entry
        inliers: Edges whose mean outlier weight is below the threshold
        outliers: The remaining edges
    """

    mean_outlier_weights: Dict[KeyPair, float] = field(default_factory=dict)
    inliers: Set[KeyPair] = field(default_factory=set)
    outliers: Set[KeyPair] = field(default_factory=set)


def normalize_translations(
    relative_translations: Mapping[KeyPair, np.ndarray],
) -> Dict[KeyPair, np.ndarray]:
    """Return unit-length copies of the relative translation vectors.

    Raises:
        InvalidArgumentError: For a zero-length translation
    """
    unit: Dict[KeyPair, np.ndarray] = {}
    for edge, translation in relative_translations.items():
        vector = np.asarray(translation, dtype=float)
        norm = np.linalg.norm(vector)
        if norm == 0.0:
            raise InvalidArgumentError(
                f"Relative translation of edge {format_edge(edge)} has zero length"
            )
        unit[edge] = vector / norm
    return unit


def projection_weights(
    relative_translations: Mapping[KeyPair, np.ndarray], direction: np.ndarray
) -> EdgeWeights:
    """Signed weight per edge: unit translation dotted with ``direction``."""
    direction = np.asarray(direction, dtype=float)
    return {
        edge: float(np.dot(translation, direction))
        for edge, translation in normalize_translations(relative_translations).items()
    }


def sample_projection_directions(
    num_projections: int, seed: Optional[int] = None, dim: int = 3
) -> np.ndarray:
    """Draw ``num_projections`` unit vectors uniformly on the sphere.

    Returns:
        Array of shape (num_projections, dim)
    """
    rng = np.random.default_rng(seed)
    directions = rng.normal(size=(num_projections, dim))
    return directions / np.linalg.norm(directions, axis=1, keepdims=True)


def filter_translation_outliers(
    relative_translations: Mapping[KeyPair, np.ndarray],
    config: Optional[OutlierRejectionConfig] = None,
    nodes: Optional[Sequence[Node]] = None,
) -> OutlierRejectionResult:
    """
    Split relative translation edges into inliers and outliers.

    Args:
        relative_translations: Translation direction from i to j per edge (i, j)
        config: Projection count, threshold and seed; defaults when omitted
        nodes: Node iteration order; endpoints in first-appearance order when omitted

    Returns:
        OutlierRejectionResult covering every input edge
    """
    if config is None:
        config = OutlierRejectionConfig()

    edges: List[KeyPair] = list(relative_translations.keys())
    if nodes is None:
        nodes = nodes_from_edges(edges)
    if not edges:
        return OutlierRejectionResult()

    unit_translations = normalize_translations(relative_translations)
    directions = sample_projection_directions(
        config.num_projections, config.seed, dim=len(next(iter(unit_translations.values())))
    )

    logger = logging.getLogger(config.logger_name)
    accumulated: OutlierWeights = {edge: 0.0 for edge in edges}
    for index, direction in enumerate(directions):
        mfas = MFAS.from_translation_projection(unit_translations, direction, nodes)
        flagged = mfas.compute_outlier_weights()
        for edge, weight in flagged.items():
            accumulated[edge] += weight
        logger.debug(
            "Projection %d/%d flagged %d edges",
            index + 1,
            config.num_projections,
            len(flagged),
        )

    result = OutlierRejectionResult()
    for edge in edges:
        mean_weight = accumulated[edge] / config.num_projections
        result.mean_outlier_weights[edge] = mean_weight
        if mean_weight < config.outlier_weight_threshold:
            result.inliers.add(edge)
        else:
            result.outliers.add(edge)

    mfas_logger.info(
        f"Rejected {len(result.outliers)} of {len(edges)} translation edges "
        f"over {config.num_projections} projections"
    )
    return result
