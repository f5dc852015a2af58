"""Tests for the optimal border search and quarter-inch print rounding."""

import math

import pytest

from bordercalc.config import CalculatorConfig
from bordercalc.geometry.optimize import (
    calculate_optimal_min_border,
    calculate_quarter_inch_min_border,
    score_border,
    snap_distance,
)
from bordercalc.geometry.print_size import compute_print_size


def test_snap_distance():
    assert snap_distance(0.5, 0.25) == pytest.approx(0)
    assert snap_distance(0.3, 0.25) == pytest.approx(0.05)
    assert snap_distance(0.45, 0.25) == pytest.approx(0.05)


def test_finds_quarter_inch_borders_on_8x10():
    # 0.25" border gives a 7.5 x 5 print with 0.25 / 2.5 borders
    best = calculate_optimal_min_border(8, 10, 3, 2, 0.5)
    assert best == pytest.approx(0.25)
    assert score_border(8, 10, 3, 2, best) == pytest.approx(0, abs=1e-9)


def test_result_is_stable_at_optimum():
    first = calculate_optimal_min_border(8, 10, 3, 2, 0.5)
    second = calculate_optimal_min_border(8, 10, 3, 2, first)
    assert second == pytest.approx(first)
    assert score_border(8, 10, 3, 2, second) <= score_border(8, 10, 3, 2, first) + 1e-6


def test_result_never_scores_worse_than_start():
    for start in (0.3, 0.6, 1.1, 1.4):
        best = calculate_optimal_min_border(11, 14, 4, 3, start)
        assert score_border(11, 14, 4, 3, best) <= score_border(11, 14, 4, 3, start) + 0.02


def test_search_window_is_configurable():
    config = CalculatorConfig(search_span=0.1)
    best = calculate_optimal_min_border(8, 10, 3, 2, 0.5, config)
    assert 0.4 - 1e-9 <= best <= 0.6 + 1e-9
    assert score_border(8, 10, 3, 2, best) <= score_border(8, 10, 3, 2, 0.5) + 1e-9


def test_zero_ratio_height_returns_start():
    assert calculate_optimal_min_border(8, 10, 3, 0, 0.37) == 0.37


def test_no_room_for_print_returns_start():
    assert calculate_optimal_min_border(0.5, 0.5, 1, 1, 1.0) == 1.0


def test_non_positive_paper_returns_start():
    assert calculate_optimal_min_border(0, 10, 3, 2, 0.5) == 0.5


def test_quarter_inch_border_for_portrait_35mm():
    # 7 x 4.667 print -> 0.625" border gives 6.75 x 4.5
    border = calculate_quarter_inch_min_border(8, 10, 3, 2, 0.5, 7, 14 / 3)
    assert border == pytest.approx(0.625)


def test_quarter_inch_border_none_when_already_aligned():
    assert calculate_quarter_inch_min_border(10, 8, 3, 2, 0.5, 9, 6) is None


def test_quarter_inch_border_none_for_invalid_input():
    assert calculate_quarter_inch_min_border(8, 10, 0, 2, 0.5, 7, 4) is None
    assert calculate_quarter_inch_min_border(8, 10, 3, 2, 0.5, 0, 0) is None


def test_score_matches_print_size_borders():
    size = compute_print_size(11, 14, 4, 3, 0.6)
    horizontal = (11 - size.width) / 2
    vertical = (14 - size.height) / 2
    expected = 2 * (snap_distance(horizontal, 0.25) + snap_distance(vertical, 0.25))
    assert score_border(11, 14, 4, 3, 0.6) == pytest.approx(expected)


def test_score_none_without_room_or_ratio():
    assert score_border(8, 10, 3, 2, 4) is None
    assert score_border(8, 10, 0, 2, 0.5) is None
    assert score_border(8, 10, float("nan"), 2, 0.5) is None


def test_non_finite_start_returned_unchanged():
    assert calculate_optimal_min_border(8, 10, 3, 2, float("inf")) == float("inf")
    assert math.isnan(calculate_optimal_min_border(8, 10, 3, 2, float("nan")))


def test_non_finite_ratio_returns_start():
    assert calculate_optimal_min_border(8, 10, float("nan"), 2, 0.5) == 0.5


def test_min_search_border_is_configurable():
    config = CalculatorConfig(min_search_border=0.3)
    best = calculate_optimal_min_border(8, 10, 3, 2, 0.5, config)
    assert best >= 0.3 - 1e-9


@pytest.mark.parametrize(
    "print_width, print_height",
    [(float("nan"), 4), (7, float("inf")), (float("-inf"), 4)],
)
def test_quarter_inch_border_none_for_non_finite_print(print_width, print_height):
    assert calculate_quarter_inch_min_border(8, 10, 3, 2, 0.5, print_width, print_height) is None


def test_quarter_inch_border_none_for_non_finite_border():
    assert calculate_quarter_inch_min_border(8, 10, 3, 2, float("nan"), 7, 14 / 3) is None


def test_quarter_inch_border_follows_config_snap():
    # Half-inch grid: 1.0" border gives a 6 x 4 print
    border = calculate_quarter_inch_min_border(8, 10, 3, 2, 0.5, 7, 14 / 3, CalculatorConfig(snap=0.5))
    assert border == pytest.approx(1.0)
