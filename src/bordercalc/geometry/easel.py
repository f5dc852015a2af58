"""Easel selection and blade indicator sizing."""

from dataclasses import dataclass

from bordercalc.config import DEFAULT_CONFIG, CalculatorConfig
from bordercalc.utils.dimensions import (
    EASEL_SIZES,
    Size,
    format_size,
    is_standard_easel_size,
    orient,
)
from bordercalc.utils.precision import round_half_up

# Catalog sorted by area so the first fit is the smallest easel
SORTED_EASEL_SIZES = tuple(sorted(EASEL_SIZES, key=lambda e: e.area))


@dataclass(frozen=True)
class EaselFit:
    """Result of fitting paper to an easel."""

    easel: Size  # easel as listed in the catalog, or the oriented paper on fallback
    slot: Size  # the easel opening, oriented the same way as the paper
    label: str
    is_non_standard: bool
    is_fallback: bool = False


def find_easel_fit(paper_width: float, paper_height: float, landscape: bool) -> EaselFit:
    """
    Select the easel used to hold the paper.

    Paper that exactly matches a catalog easel (in either axis order) is
    standard. Anything else goes into the smallest easel it fits in, trying
    both the stored and the rotated orientation of the easel. Paper larger
    than every easel falls back to its own (oriented) dimensions.

    Args:
        paper_width: Paper width in inches, as listed (portrait).
        paper_height: Paper height in inches, as listed (portrait).
        landscape: Whether the paper is turned landscape.

    Returns:
        EaselFit describing the catalog easel and the slot oriented like the paper.
    """
    paper = orient(paper_width, paper_height, landscape)

    if is_standard_easel_size(paper_width, paper_height):
        for easel in EASEL_SIZES:
            if easel.width == paper.width and easel.height == paper.height:
                return EaselFit(easel.to_size(), easel.to_size(), easel.label, False)
            if easel.height == paper.width and easel.width == paper.height:
                return EaselFit(easel.to_size(), easel.to_size().transposed(), easel.label, False)

    for easel in SORTED_EASEL_SIZES:
        fits = easel.width >= paper.width and easel.height >= paper.height
        fits_rotated = easel.height >= paper.width and easel.width >= paper.height
        if not fits and not fits_rotated:
            continue
        slot = easel.to_size() if fits else easel.to_size().transposed()
        return EaselFit(easel.to_size(), slot, easel.label, True)

    return EaselFit(paper, paper, format_size(paper.width, paper.height), True, is_fallback=True)


def calculate_blade_thickness(
    paper_width: float,
    paper_height: float,
    config: CalculatorConfig | None = None,
) -> int:
    """
    Scale the blade indicator thickness to the paper area.

    Smaller paper gets a thicker indicator, capped at max_blade_scale times
    the base. Larger paper gets a thinner one with no lower bound.

    Args:
        paper_width: Paper width in inches.
        paper_height: Paper height in inches.
        config: Calculator constants. Defaults to CalculatorConfig().

    Returns:
        Thickness rounded to a whole number. Non-positive paper sides return
        the unscaled base thickness.
    """
    config = config or DEFAULT_CONFIG
    if paper_width <= 0 or paper_height <= 0:
        return config.blade_thickness

    area = paper_width * paper_height
    scale = min(config.reference_paper_area / max(area, config.epsilon), config.max_blade_scale)
    return round_half_up(config.blade_thickness * scale)
