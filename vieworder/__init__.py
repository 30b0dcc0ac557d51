"""Core vieworder package."""

__all__ = [
    "MFAS",
    "flip_negative_edges",
    "mfas_ratio",
    "outlier_weights",
    "filter_translation_outliers",
    "OutlierRejectionConfig",
    "ViewOrderError",
    "InvalidArgumentError",
    "MissingNodeError",
]


def __getattr__(name):
    if name in {
        "MFAS",
        "flip_negative_edges",
        "mfas_ratio",
        "outlier_weights",
        "filter_translation_outliers",
    }:
        from .mfas import (
            MFAS,
            flip_negative_edges,
            mfas_ratio,
            outlier_weights,
            filter_translation_outliers,
        )
        return locals()[name]
    if name == "OutlierRejectionConfig":
        from .config import OutlierRejectionConfig
        return OutlierRejectionConfig
    if name in {"ViewOrderError", "InvalidArgumentError", "MissingNodeError"}:
        from .exceptions import (
            ViewOrderError,
            InvalidArgumentError,
            MissingNodeError,
        )
        return locals()[name]
    raise AttributeError(name)
