"""Resolve the caller's selections into oriented paper and ratio dimensions."""

import math
from dataclasses import dataclass

from bordercalc.api.models import BorderCalculatorState
from bordercalc.utils.dimensions import (
    CUSTOM,
    DEFAULT_PAPER_ID,
    EVEN_BORDERS,
    Size,
    format_size,
    get_aspect_ratio,
    get_paper_size,
    orient,
)


@dataclass(frozen=True)
class ResolvedPaper:
    """Paper as listed (portrait), before orientation."""

    size: Size
    warning: str | None = None


@dataclass(frozen=True)
class ResolvedDimensions:
    """Paper and ratio with landscape and ratio-flip applied."""

    listed_paper: Size
    paper: Size
    ratio: Size
    paper_warning: str | None = None


@dataclass(frozen=True)
class ResolvedMinBorder:
    value: float
    last_valid: float
    warning: str | None = None


def resolve_paper(state: BorderCalculatorState) -> ResolvedPaper:
    """Look up the selected paper, falling back to 8x10 for invalid custom sizes."""
    if state.paper_size == CUSTOM:
        width, height = state.custom_paper_width, state.custom_paper_height
        if math.isfinite(width) and math.isfinite(height) and width > 0 and height > 0:
            return ResolvedPaper(Size(width, height))

        fallback = get_paper_size(DEFAULT_PAPER_ID)
        return ResolvedPaper(
            Size(fallback.width, fallback.height),
            warning=(
                f"Custom paper size ({format_size(width, height)}) must be finite and greater than zero; "
                f"using {fallback.label}."
            ),
        )

    paper = get_paper_size(state.paper_size)
    return ResolvedPaper(Size(paper.width, paper.height))


def resolve_ratio(state: BorderCalculatorState, paper: Size) -> Size:
    """
    Look up the selected aspect ratio.

    "even-borders" borrows the paper's own proportions. Custom ratios are
    passed through unchecked; the geometry stages treat non-positive or
    non-finite values as no print.
    """
    if state.aspect_ratio == EVEN_BORDERS:
        return Size(paper.width if paper.width > 0 else 1.0, paper.height if paper.height > 0 else 1.0)
    if state.aspect_ratio == CUSTOM:
        return Size(state.custom_aspect_width, state.custom_aspect_height)
    ratio = get_aspect_ratio(state.aspect_ratio)
    return Size(ratio.width, ratio.height)


def resolve_dimensions(state: BorderCalculatorState) -> ResolvedDimensions:
    """
    Apply orientation to the selected paper and ratio.

    Landscape swaps the paper sides. Ratio flip swaps the ratio, except for
    even borders, which always follow the oriented paper.
    """
    resolved = resolve_paper(state)
    listed = resolved.size
    paper = orient(listed.width, listed.height, state.is_landscape)

    if state.aspect_ratio == EVEN_BORDERS:
        ratio = resolve_ratio(state, paper)
    else:
        ratio = resolve_ratio(state, listed)
        if state.is_ratio_flipped:
            ratio = ratio.transposed()

    return ResolvedDimensions(
        listed_paper=listed,
        paper=paper,
        ratio=ratio,
        paper_warning=resolved.warning,
    )


def resolve_min_border(state: BorderCalculatorState, paper: Size) -> ResolvedMinBorder:
    """
    Validate the requested minimum border against the oriented paper.

    A negative border, or one reaching half the shorter paper side, is
    replaced by the last valid border (or 0 when that is unusable too).
    """
    max_border = min(paper.width, paper.height) / 2
    requested = state.min_border

    def usable(value: float) -> bool:
        return value >= 0 and (max_border <= 0 or value < max_border)

    if usable(requested):
        return ResolvedMinBorder(requested, requested)

    fallback = state.last_valid_min_border if usable(state.last_valid_min_border) else 0.0
    if requested < 0:
        warning = f"Border cannot be negative; using {fallback:g}."
    else:
        warning = f"Minimum border too large; using {fallback:g}."
    return ResolvedMinBorder(fallback, fallback, warning)
