"""Utility modules."""

from bordercalc.utils.dimensions import (
    ASPECT_RATIOS,
    CUSTOM,
    EASEL_SIZES,
    EVEN_BORDERS,
    MAX_EASEL_DIMENSION,
    PAPER_SIZES,
    AspectRatio,
    EaselSize,
    PaperSize,
    Size,
    format_size,
    get_aspect_ratio,
    get_paper_size,
    is_standard_easel_size,
    orient,
)
from bordercalc.utils.precision import is_increment_of, round_half_up, round_to_precision

__all__ = [
    "ASPECT_RATIOS",
    "CUSTOM",
    "EASEL_SIZES",
    "EVEN_BORDERS",
    "MAX_EASEL_DIMENSION",
    "PAPER_SIZES",
    "AspectRatio",
    "EaselSize",
    "PaperSize",
    "Size",
    "format_size",
    "get_aspect_ratio",
    "get_paper_size",
    "is_increment_of",
    "is_standard_easel_size",
    "orient",
    "round_half_up",
    "round_to_precision",
]
