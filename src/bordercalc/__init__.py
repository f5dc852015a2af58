"""Darkroom print border calculator."""

__version__ = "0.1.0"

# High-level Python API
from bordercalc.api import (
    DEFAULT_STATE,
    BorderCalculatorState,
    Calculation,
    calculate,
    optimal_min_border,
)
from bordercalc.config import CalculatorConfig, load_config
from bordercalc.geometry import (
    calculate_blade_thickness,
    calculate_optimal_min_border,
    calculate_quarter_inch_min_border,
    compute_print_size,
    find_easel_fit,
)
from bordercalc.utils.dimensions import ASPECT_RATIOS, EASEL_SIZES, PAPER_SIZES

__all__ = [
    "ASPECT_RATIOS",
    "DEFAULT_STATE",
    "EASEL_SIZES",
    "PAPER_SIZES",
    "BorderCalculatorState",
    "CalculatorConfig",
    "Calculation",
    "calculate",
    "calculate_blade_thickness",
    "calculate_optimal_min_border",
    "calculate_quarter_inch_min_border",
    "compute_print_size",
    "find_easel_fit",
    "load_config",
    "optimal_min_border",
]
