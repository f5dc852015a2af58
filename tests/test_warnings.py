"""Tests for warning aggregation."""

from bordercalc.api.warnings import (
    BLADE_WARNING,
    WarningSet,
    blade_warning,
    collect_warnings,
    min_border_conflict_warning,
    offset_warning,
    paper_size_warning,
)
from bordercalc.geometry.blades import PaperShift, blade_readings
from bordercalc.geometry.easel import find_easel_fit
from bordercalc.geometry.print_size import Borders, clamp_offsets
from bordercalc.utils.dimensions import Size


def test_blade_readings_add_shift():
    readings = blade_readings(Borders(0.5, 0.5, 1.0, 1.0), PaperShift(0.25, 0.5))
    assert readings == Borders(0.75, 0.75, 1.5, 1.5)


def test_negative_blade_reading_warns():
    assert blade_warning(Borders(-0.1, 1, 1, 1)) == BLADE_WARNING
    assert "no markings below zero" in BLADE_WARNING
    assert blade_warning(Borders(0, 1, 1, 1)) is None


def test_offset_warning_wording():
    both = clamp_offsets(10, 8, 9, 6, 0.5, 5, 5, False)
    assert offset_warning(both, False) == (
        "Horizontal and vertical offsets exceed available space; adjusted to honour min-border."
    )
    vertical = clamp_offsets(10, 8, 9, 6, 0.5, 0, 5, True)
    assert offset_warning(vertical, True) == (
        "Vertical offset exceeds available space; adjusted to keep print on paper."
    )
    assert offset_warning(clamp_offsets(10, 8, 9, 6, 0.5, 0, 0, False), False) is None


def test_min_border_conflict():
    assert min_border_conflict_warning(Borders(0.5, 0.5, 1, 1), 0.5) is None
    assert min_border_conflict_warning(Borders(0.25, 0.75, 1, 1), 0.5) is not None


def test_collect_warnings_all_clear():
    clamp = clamp_offsets(10, 8, 9, 6, 0.5, 0, 0, False)
    borders = Borders(0.5, 0.5, 1, 1)
    warnings = collect_warnings(clamp, borders, borders, find_easel_fit(8, 10, True), Size(10, 8), 0.5, False)
    assert warnings == WarningSet()
    assert warnings.as_tuple() == ()


def test_collect_warnings_prefers_validation_messages():
    clamp = clamp_offsets(10, 8, 9, 6, 0.5, 0.5, 0, True)
    borders = Borders(0, 1, 1, 1)
    warnings = collect_warnings(
        clamp,
        borders,
        borders,
        find_easel_fit(30, 40, False),
        Size(30, 40),
        0.5,
        True,
        min_border_warning="Minimum border too large; using 0.5.",
        paper_warning="bad paper",
    )
    assert warnings.min_border == "Minimum border too large; using 0.5."
    assert warnings.paper_size == "bad paper"
    assert warnings.as_tuple() == ("Minimum border too large; using 0.5.", "bad paper")


def test_paper_size_warning_guidance():
    assert paper_size_warning(Size(10, 8), find_easel_fit(10, 8, True)) is None

    fitted = paper_size_warning(Size(6, 4), find_easel_fit(6, 4, True))
    assert "Center it in the 5x7 easel slot" in fitted
    assert "paper shift" in fitted

    oversized = paper_size_warning(Size(40, 30), find_easel_fit(40, 30, True))
    assert "fully to one side" in oversized
