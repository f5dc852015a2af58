"""Print size, offset clamping and border geometry."""

import math
from dataclasses import dataclass

from bordercalc.utils.dimensions import Size


@dataclass(frozen=True)
class OffsetClamp:
    """Offsets after clamping, with the centred gap on each axis."""

    horizontal: float
    vertical: float
    half_width: float  # (paper width - print width) / 2
    half_height: float  # (paper height - print height) / 2
    horizontal_clamped: bool
    vertical_clamped: bool

    @property
    def was_clamped(self) -> bool:
        return self.horizontal_clamped or self.vertical_clamped


@dataclass(frozen=True)
class Borders:
    """Distance from each paper edge to the print, in inches."""

    left: float
    right: float
    top: float
    bottom: float


def compute_print_size(
    paper_width: float,
    paper_height: float,
    ratio_width: float,
    ratio_height: float,
    min_border: float,
) -> Size:
    """
    Find the largest print of the given ratio inside the paper minus the border.

    Args:
        paper_width: Oriented paper width in inches.
        paper_height: Oriented paper height in inches.
        ratio_width: Width component of the aspect ratio.
        ratio_height: Height component of the aspect ratio.
        min_border: Border kept on every side, in inches.

    Returns:
        Print Size. Size(0, 0) when the inputs leave no room, or any input is
        invalid (non-positive or not finite).
    """
    if not all(math.isfinite(v) for v in (paper_width, paper_height, ratio_width, ratio_height, min_border)):
        return Size(0.0, 0.0)
    if ratio_width <= 0 or ratio_height <= 0 or paper_width <= 0 or paper_height <= 0 or min_border < 0:
        return Size(0.0, 0.0)

    available_width = paper_width - 2 * min_border
    available_height = paper_height - 2 * min_border
    if available_width <= 0 or available_height <= 0:
        return Size(0.0, 0.0)

    target_ratio = ratio_width / ratio_height

    # Height binds when the available box is wider than the target
    if available_width / available_height > target_ratio:
        return Size(available_height * target_ratio, available_height)
    return Size(available_width, available_width / target_ratio)


def clamp_offsets(
    paper_width: float,
    paper_height: float,
    print_width: float,
    print_height: float,
    min_border: float,
    horizontal_offset: float,
    vertical_offset: float,
    ignore_min_border: bool,
) -> OffsetClamp:
    """
    Bound the requested offsets so the print stays where it is allowed to be.

    Each axis may move by half the slack between paper and print, less the
    minimum border. With ignore_min_border the print may run up to the paper
    edge instead.
    """
    half_width = (paper_width - print_width) / 2
    half_height = (paper_height - print_height) / 2

    if ignore_min_border:
        max_h, max_v = half_width, half_height
    else:
        max_h, max_v = half_width - min_border, half_height - min_border
    max_h = max(max_h, 0.0)
    max_v = max(max_v, 0.0)

    h = max(-max_h, min(max_h, horizontal_offset))
    v = max(-max_v, min(max_v, vertical_offset))

    return OffsetClamp(
        horizontal=h,
        vertical=v,
        half_width=half_width,
        half_height=half_height,
        horizontal_clamped=h != horizontal_offset,
        vertical_clamped=v != vertical_offset,
    )


def borders_from_gaps(half_width: float, half_height: float, horizontal: float, vertical: float) -> Borders:
    """
    Turn centred gaps and offsets into the four borders.

    A positive horizontal offset moves the print right; a positive vertical
    offset moves it down.
    """
    return Borders(
        left=half_width - horizontal,
        right=half_width + horizontal,
        top=half_height - vertical,
        bottom=half_height + vertical,
    )


def percent_of(value: float, total: float) -> float:
    """Value as a percentage of total, 0 when total is 0."""
    return 100 * value / total if total else 0.0


def border_percentages(borders: Borders, paper_width: float, paper_height: float) -> Borders:
    """Express each border as a percentage of the paper side it lies along."""
    return Borders(
        left=percent_of(borders.left, paper_width),
        right=percent_of(borders.right, paper_width),
        top=percent_of(borders.top, paper_height),
        bottom=percent_of(borders.bottom, paper_height),
    )


def validate_print_fits(
    paper_width: float,
    paper_height: float,
    print_width: float,
    print_height: float,
    horizontal_offset: float,
    vertical_offset: float,
) -> bool:
    """True when the offset print stays entirely on the paper."""
    half_width = (paper_width - print_width) / 2
    half_height = (paper_height - print_height) / 2
    borders = borders_from_gaps(half_width, half_height, horizontal_offset, vertical_offset)
    return min(borders.left, borders.right, borders.top, borders.bottom) >= 0
