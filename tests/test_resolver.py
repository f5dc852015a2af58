"""Tests for paper, ratio and min-border resolution."""

import pytest

from bordercalc.api.models import BorderCalculatorState
from bordercalc.api.resolver import resolve_dimensions, resolve_min_border, resolve_paper
from bordercalc.utils.dimensions import Size, get_aspect_ratio, get_paper_size


def test_catalog_lookup_fallbacks():
    assert get_paper_size("nope") == get_paper_size("8x10")
    assert get_aspect_ratio("nope") == get_aspect_ratio("3:2")


def test_landscape_swaps_paper(default_state):
    dims = resolve_dimensions(default_state)
    assert dims.listed_paper == Size(8, 10)
    assert dims.paper == Size(10, 8)
    assert dims.ratio == Size(3, 2)


def test_ratio_flip():
    state = BorderCalculatorState(is_landscape=False, is_ratio_flipped=True)
    assert resolve_dimensions(state).ratio == Size(2, 3)


def test_even_borders_follow_oriented_paper_and_ignore_flip():
    state = BorderCalculatorState(aspect_ratio="even-borders", is_ratio_flipped=True)
    dims = resolve_dimensions(state)
    assert dims.ratio == dims.paper == Size(10, 8)


def test_custom_paper_and_ratio():
    state = BorderCalculatorState(
        paper_size="custom",
        custom_paper_width=9,
        custom_paper_height=12,
        aspect_ratio="custom",
        custom_aspect_width=5,
        custom_aspect_height=4,
        is_landscape=False,
    )
    dims = resolve_dimensions(state)
    assert dims.paper == Size(9, 12)
    assert dims.ratio == Size(5, 4)


def test_invalid_custom_paper_falls_back_to_8x10():
    resolved = resolve_paper(BorderCalculatorState(paper_size="custom", custom_paper_width=0, custom_paper_height=10))
    assert resolved.size == Size(8, 10)
    assert "greater than zero" in resolved.warning


def test_valid_min_border_passes_through():
    border = resolve_min_border(BorderCalculatorState(min_border=1.25), Size(10, 8))
    assert border.value == 1.25
    assert border.last_valid == 1.25
    assert border.warning is None


def test_negative_min_border_uses_last_valid():
    state = BorderCalculatorState(min_border=-1, last_valid_min_border=0.75)
    border = resolve_min_border(state, Size(10, 8))
    assert border.value == 0.75
    assert border.warning == "Border cannot be negative; using 0.75."


def test_min_border_reaching_half_paper_is_rejected():
    border = resolve_min_border(BorderCalculatorState(min_border=4), Size(10, 8))
    assert border.value == 0.5
    assert border.warning == "Minimum border too large; using 0.5."


def test_unusable_last_valid_border_falls_back_to_zero():
    state = BorderCalculatorState(min_border=9, last_valid_min_border=9)
    border = resolve_min_border(state, Size(10, 8))
    assert border.value == 0
    assert border.warning is not None


@pytest.mark.parametrize("ratio_id", ["3:2", "65:24", "1:1", "2.39:1"])
def test_catalog_ratios_resolve(ratio_id):
    ratio = resolve_dimensions(BorderCalculatorState(aspect_ratio=ratio_id)).ratio
    expected = get_aspect_ratio(ratio_id)
    assert ratio == Size(expected.width, expected.height)
