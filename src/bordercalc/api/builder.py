"""High-level API: run the full border calculation."""

import logging

from bordercalc.api.models import BorderCalculatorState, Calculation
from bordercalc.api.resolver import resolve_dimensions, resolve_min_border
from bordercalc.api.warnings import collect_warnings
from bordercalc.config import DEFAULT_CONFIG, CalculatorConfig
from bordercalc.geometry.blades import blade_readings, paper_shift
from bordercalc.geometry.easel import calculate_blade_thickness, find_easel_fit
from bordercalc.geometry.optimize import calculate_optimal_min_border
from bordercalc.geometry.print_size import (
    border_percentages,
    borders_from_gaps,
    clamp_offsets,
    compute_print_size,
    percent_of,
)
from bordercalc.utils.dimensions import Size

logger = logging.getLogger(__name__)


def preview_scale(paper: Size, config: CalculatorConfig | None = None) -> float:
    """Scale that fits the paper inside the preview box. 1 for empty paper."""
    config = config or DEFAULT_CONFIG
    if not paper.width or not paper.height:
        return 1.0
    return min(config.preview_max_width / paper.width, config.preview_max_height / paper.height)


def calculate(
    state: BorderCalculatorState,
    config: CalculatorConfig | None = None,
) -> Calculation:
    """
    Compute print placement, borders and blade readings for a state.

    Every stage is a pure function of the state, so identical states give
    identical results. Nothing here raises for bad numbers; problems come
    back as warning strings on the Calculation.

    Args:
        state: Caller's selections (paper, ratio, border, offsets, orientation).
        config: Optional calculator constants. If None, uses CalculatorConfig() defaults.

    Returns:
        Calculation with the geometry, easel setup and any warnings.

    Example:
        ```python
        from bordercalc import BorderCalculatorState, calculate

        result = calculate(BorderCalculatorState(paper_size="8x10", aspect_ratio="3:2"))
        print(result.print_width, result.print_height)  # 9.0 6.0
        ```
    """
    config = config or DEFAULT_CONFIG

    dims = resolve_dimensions(state)
    paper, ratio = dims.paper, dims.ratio
    border = resolve_min_border(state, paper)

    print_size = compute_print_size(paper.width, paper.height, ratio.width, ratio.height, border.value)

    clamp = clamp_offsets(
        paper.width,
        paper.height,
        print_size.width,
        print_size.height,
        border.value,
        state.horizontal_offset if state.enable_offset else 0.0,
        state.vertical_offset if state.enable_offset else 0.0,
        state.ignore_min_border,
    )
    borders = borders_from_gaps(clamp.half_width, clamp.half_height, clamp.horizontal, clamp.vertical)
    percents = border_percentages(borders, paper.width, paper.height)

    fit = find_easel_fit(dims.listed_paper.width, dims.listed_paper.height, state.is_landscape)
    shift = paper_shift(paper, fit)
    readings = blade_readings(borders, shift)

    warnings = collect_warnings(
        clamp,
        readings,
        borders,
        fit,
        paper,
        border.value,
        state.ignore_min_border,
        min_border_warning=border.warning,
        paper_warning=dims.paper_warning,
    )

    scale = preview_scale(paper, config)

    logger.debug(
        f"Paper {paper.width}x{paper.height}, ratio {ratio.width}:{ratio.height}, "
        f"border {border.value} -> print {print_size.width:.3f}x{print_size.height:.3f} "
        f"in {fit.label} easel"
    )
    for warning in warnings.as_tuple():
        logger.info(warning)

    return Calculation(
        paper_width=paper.width,
        paper_height=paper.height,
        print_width=print_size.width,
        print_height=print_size.height,
        print_width_percent=percent_of(print_size.width, paper.width),
        print_height_percent=percent_of(print_size.height, paper.height),
        left_border=borders.left,
        right_border=borders.right,
        top_border=borders.top,
        bottom_border=borders.bottom,
        left_border_percent=percents.left,
        right_border_percent=percents.right,
        top_border_percent=percents.top,
        bottom_border_percent=percents.bottom,
        left_blade_reading=readings.left,
        right_blade_reading=readings.right,
        top_blade_reading=readings.top,
        bottom_blade_reading=readings.bottom,
        blade_thickness=calculate_blade_thickness(paper.width, paper.height, config),
        easel_size=fit.easel,
        easel_slot=fit.slot,
        easel_size_label=fit.label,
        is_non_standard_paper_size=fit.is_non_standard,
        paper_shift_x=shift.x,
        paper_shift_y=shift.y,
        min_border=border.value,
        last_valid_min_border=border.last_valid,
        clamped_horizontal_offset=clamp.horizontal,
        clamped_vertical_offset=clamp.vertical,
        preview_scale=scale,
        preview_width=paper.width * scale,
        preview_height=paper.height * scale,
        offset_warning=warnings.offset,
        blade_warning=warnings.blade,
        min_border_warning=warnings.min_border,
        paper_size_warning=warnings.paper_size,
    )


def optimal_min_border(
    state: BorderCalculatorState,
    config: CalculatorConfig | None = None,
) -> float:
    """
    Suggest a minimum border near the current one that gives quarter-inch borders.

    Args:
        state: Caller's selections; the paper and ratio are resolved as in calculate().
        config: Optional calculator constants (search window, step, snap).

    Returns:
        Suggested border in inches, or the current border when no better one exists.
    """
    dims = resolve_dimensions(state)
    border = resolve_min_border(state, dims.paper)
    return calculate_optimal_min_border(
        dims.paper.width,
        dims.paper.height,
        dims.ratio.width,
        dims.ratio.height,
        border.value,
        config,
    )
