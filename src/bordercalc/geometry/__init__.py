"""Geometry core: print size, borders, easel fitting and blade readings."""

from bordercalc.geometry.blades import PaperShift, blade_readings, has_negative_reading, paper_shift
from bordercalc.geometry.easel import EaselFit, calculate_blade_thickness, find_easel_fit
from bordercalc.geometry.optimize import (
    calculate_optimal_min_border,
    calculate_quarter_inch_min_border,
    score_border,
)
from bordercalc.geometry.print_size import (
    Borders,
    OffsetClamp,
    border_percentages,
    borders_from_gaps,
    clamp_offsets,
    compute_print_size,
    validate_print_fits,
)

__all__ = [
    "Borders",
    "EaselFit",
    "OffsetClamp",
    "PaperShift",
    "blade_readings",
    "border_percentages",
    "borders_from_gaps",
    "calculate_blade_thickness",
    "calculate_optimal_min_border",
    "calculate_quarter_inch_min_border",
    "clamp_offsets",
    "compute_print_size",
    "find_easel_fit",
    "has_negative_reading",
    "paper_shift",
    "score_border",
    "validate_print_fits",
]
