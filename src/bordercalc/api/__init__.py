"""Calculation pipeline and its input/output models."""

from bordercalc.api.builder import calculate, optimal_min_border, preview_scale
from bordercalc.api.models import DEFAULT_STATE, BorderCalculatorState, Calculation
from bordercalc.api.resolver import resolve_dimensions, resolve_min_border, resolve_paper, resolve_ratio
from bordercalc.api.warnings import WarningSet, collect_warnings

__all__ = [
    "DEFAULT_STATE",
    "BorderCalculatorState",
    "Calculation",
    "WarningSet",
    "calculate",
    "collect_warnings",
    "optimal_min_border",
    "preview_scale",
    "resolve_dimensions",
    "resolve_min_border",
    "resolve_paper",
    "resolve_ratio",
]
