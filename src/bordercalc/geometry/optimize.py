"""Border searches that favour ruler-friendly measurements."""

import math

from bordercalc.config import DEFAULT_CONFIG, CalculatorConfig
from bordercalc.geometry.print_size import compute_print_size
from bordercalc.utils.precision import is_increment_of, round_to_precision


def snap_distance(value: float, snap: float) -> float:
    """Distance from value to the nearest multiple of snap."""
    remainder = value % snap
    return min(remainder, snap - remainder)


def score_border(
    paper_width: float,
    paper_height: float,
    ratio_width: float,
    ratio_height: float,
    min_border: float,
    snap: float | None = None,
) -> float | None:
    """
    Sum of the distances of all four borders from the snap grid.

    Returns None when the border leaves no room for a print.
    """
    snap = snap or DEFAULT_CONFIG.snap
    size = compute_print_size(paper_width, paper_height, ratio_width, ratio_height, min_border)
    if size.width <= 0 or size.height <= 0:
        return None
    horizontal = (paper_width - size.width) / 2
    vertical = (paper_height - size.height) / 2
    return 2 * (snap_distance(horizontal, snap) + snap_distance(vertical, snap))


def calculate_optimal_min_border(
    paper_width: float,
    paper_height: float,
    ratio_width: float,
    ratio_height: float,
    start: float,
    config: CalculatorConfig | None = None,
) -> float:
    """
    Nudge the minimum border toward one that gives quarter-inch borders.

    Candidates are scanned from max(min_search_border, start - span) to
    start + span in steps of max(search_step, window / adaptive_step_divisor).
    Each is scored by how far its borders sit from the snap grid, and the
    first best scorer wins. A perfect score stops the scan early.

    Args:
        paper_width: Oriented paper width in inches.
        paper_height: Oriented paper height in inches.
        ratio_width: Width component of the aspect ratio.
        ratio_height: Height component of the aspect ratio.
        start: Current minimum border in inches.
        config: Search window, step and snap. Defaults to CalculatorConfig().

    Returns:
        Best border rounded to config.decimal_places, or start unchanged when
        an input is degenerate or no candidate leaves room for a print.
    """
    config = config or DEFAULT_CONFIG
    if not all(math.isfinite(v) for v in (paper_width, paper_height, ratio_width, ratio_height, start)):
        return start
    if ratio_width <= 0 or ratio_height <= 0 or paper_width <= 0 or paper_height <= 0:
        return start

    lower = max(config.min_search_border, start - config.search_span)
    upper = start + config.search_span
    step = max(config.search_step, (upper - lower) / config.adaptive_step_divisor)
    count = int(math.floor((upper - lower) / step + config.epsilon))

    best: float | None = None
    best_score = math.inf

    for i in range(count + 1):
        candidate = lower + i * step
        score = score_border(paper_width, paper_height, ratio_width, ratio_height, candidate, config.snap)
        if score is None:
            continue
        if score < best_score - config.epsilon:
            best_score = score
            best = candidate
            if best_score < config.epsilon:
                break

    if best is None:
        return start
    return round_to_precision(best, config.decimal_places)


def calculate_quarter_inch_min_border(
    paper_width: float,
    paper_height: float,
    ratio_width: float,
    ratio_height: float,
    current_min_border: float,
    print_width: float,
    print_height: float,
    config: CalculatorConfig | None = None,
) -> float | None:
    """
    Find a border that makes both print sides whole multiples of the snap grid.

    Works down from the largest grid-aligned print of the exact ratio that
    fits inside the current print, and returns the first border that is not
    smaller than the current one and produces such a print. With the default
    config the grid is a quarter inch.

    Returns:
        The new border, or None when the print is already aligned, an input
        is degenerate, or no such border exists.
    """
    config = config or DEFAULT_CONFIG
    values = (paper_width, paper_height, ratio_width, ratio_height, current_min_border, print_width, print_height)
    if not all(math.isfinite(v) for v in values):
        return None
    if min(paper_width, paper_height, ratio_width, ratio_height, print_width, print_height) <= 0:
        return None

    snap = config.snap
    tolerance = config.quarter_tolerance
    if is_increment_of(print_width, snap) and is_increment_of(print_height, snap):
        return None

    unit_width = ratio_width * snap
    unit_height = ratio_height * snap
    multiplier = min(
        math.floor((print_width + tolerance) / unit_width),
        math.floor((print_height + tolerance) / unit_height),
    )

    def evaluate(candidate: float) -> float | None:
        if not math.isfinite(candidate) or candidate < current_min_border - tolerance:
            return None
        size = compute_print_size(paper_width, paper_height, ratio_width, ratio_height, candidate)
        if size.width <= 0 or size.height <= 0:
            return None
        if size.width > print_width + snap or size.height > print_height + snap:
            return None
        if not (is_increment_of(size.width, snap) and is_increment_of(size.height, snap)):
            return None
        border = max(candidate, 0.0)
        if abs(border - current_min_border) < tolerance:
            return None
        return border

    while multiplier > 0:
        width_candidate = (paper_width - unit_width * multiplier) / 2
        found = evaluate(width_candidate)
        if found is not None:
            return found

        height_candidate = (paper_height - unit_height * multiplier) / 2
        if abs(height_candidate - width_candidate) > tolerance:
            found = evaluate(height_candidate)
            if found is not None:
                return found

        multiplier -= 1

    return None
