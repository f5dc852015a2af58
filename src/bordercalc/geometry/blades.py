"""Blade readings for the enlarging easel."""

from dataclasses import dataclass

from bordercalc.geometry.easel import EaselFit
from bordercalc.geometry.print_size import Borders
from bordercalc.utils.dimensions import Size


@dataclass(frozen=True)
class PaperShift:
    """Gap between the paper edge and the easel slot edge on each axis."""

    x: float
    y: float


def paper_shift(paper: Size, fit: EaselFit) -> PaperShift:
    """
    Half the difference between the easel slot and the paper on each axis.

    Standard paper fills its slot, so the shift is zero.
    """
    if not fit.is_non_standard:
        return PaperShift(0.0, 0.0)
    return PaperShift(
        x=(fit.slot.width - paper.width) / 2,
        y=(fit.slot.height - paper.height) / 2,
    )


def blade_readings(borders: Borders, shift: PaperShift) -> Borders:
    """
    Ruler position of each easel blade, measured from the slot edge.

    Args:
        borders: Borders measured from the paper edges.
        shift: Paper-to-slot shift for the paper centred in its slot.

    Returns:
        Readings for the left, right, top and bottom blades.
    """
    return Borders(
        left=borders.left + shift.x,
        right=borders.right + shift.x,
        top=borders.top + shift.y,
        bottom=borders.bottom + shift.y,
    )


def has_negative_reading(readings: Borders) -> bool:
    return min(readings.left, readings.right, readings.top, readings.bottom) < 0
