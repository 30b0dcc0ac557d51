"""
Configuration module for vieworder.

Holds the fixed numerical constants of the ordering heuristic and the
defaults of the translation-direction outlier rejection.
"""

from dataclasses import dataclass
from typing import Dict

from vieworder.exceptions import InvalidArgumentError

# In-degree below this value marks a node as a source during selection.
SOURCE_TOLERANCE = 1e-8

# Added to both degrees in the out/in ratio score.
LAPLACE_SMOOTHING = 1.0

# Translation-direction outlier rejection defaults
DEFAULT_NUM_PROJECTIONS = 48
DEFAULT_OUTLIER_WEIGHT_THRESHOLD = 0.1
DEFAULT_PROJECTION_SEED = 0

LOGGING_CONFIG: Dict[str, str] = {
    "log_level": "INFO",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


@dataclass
class OutlierRejectionConfig:
    """Configuration for projection-based translation outlier rejection."""

    num_projections: int = DEFAULT_NUM_PROJECTIONS
    outlier_weight_threshold: float = DEFAULT_OUTLIER_WEIGHT_THRESHOLD
    seed: int = DEFAULT_PROJECTION_SEED
    logger_name: str = "vieworder.mfas"

    def __post_init__(self) -> None:
        if self.num_projections < 1:
            raise InvalidArgumentError(
                f"num_projections must be positive, got {self.num_projections}"
            )
        if self.outlier_weight_threshold < 0:
            raise InvalidArgumentError(
                "outlier_weight_threshold must be non-negative, "
                f"got {self.outlier_weight_threshold}"
            )
