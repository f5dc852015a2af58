"""Input state and calculation result models."""

from dataclasses import dataclass

from bordercalc.types import BladeSide, Inch, PaperId, Percent, RatioId
from bordercalc.utils.dimensions import DEFAULT_PAPER_ID, DEFAULT_RATIO_ID, Size


@dataclass(frozen=True)
class BorderCalculatorState:
    """Snapshot of everything the caller has selected."""

    paper_size: PaperId = DEFAULT_PAPER_ID  # catalog id or "custom"
    aspect_ratio: RatioId = DEFAULT_RATIO_ID  # catalog id, "even-borders" or "custom"
    custom_paper_width: float = 0.0
    custom_paper_height: float = 0.0
    custom_aspect_width: float = 0.0
    custom_aspect_height: float = 0.0
    min_border: float = 0.5
    last_valid_min_border: float = 0.5
    enable_offset: bool = False
    ignore_min_border: bool = False
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    is_landscape: bool = True
    is_ratio_flipped: bool = False
    show_blades: bool = False  # display only; carried for callers


# 35mm on 8x10, 6x9in
DEFAULT_STATE = BorderCalculatorState()


@dataclass(frozen=True)
class Calculation:
    """Everything needed to set up the easel and draw the preview."""

    # Paper and print (inches, oriented)
    paper_width: Inch
    paper_height: Inch
    print_width: Inch
    print_height: Inch
    print_width_percent: Percent
    print_height_percent: Percent

    # Borders (inches from each paper edge)
    left_border: Inch
    right_border: Inch
    top_border: Inch
    bottom_border: Inch
    left_border_percent: Percent
    right_border_percent: Percent
    top_border_percent: Percent
    bottom_border_percent: Percent

    # Easel
    left_blade_reading: Inch
    right_blade_reading: Inch
    top_blade_reading: Inch
    bottom_blade_reading: Inch
    blade_thickness: int
    easel_size: Size
    easel_slot: Size
    easel_size_label: str
    is_non_standard_paper_size: bool
    paper_shift_x: Inch
    paper_shift_y: Inch

    # Border and offsets actually used
    min_border: Inch
    last_valid_min_border: Inch
    clamped_horizontal_offset: Inch
    clamped_vertical_offset: Inch

    # Preview
    preview_scale: float
    preview_width: float
    preview_height: float

    # Warnings
    offset_warning: str | None = None
    blade_warning: str | None = None
    min_border_warning: str | None = None
    paper_size_warning: str | None = None

    @property
    def warnings(self) -> tuple[str, ...]:
        """Non-empty warnings in display order."""
        return tuple(
            w
            for w in (self.offset_warning, self.blade_warning, self.min_border_warning, self.paper_size_warning)
            if w
        )

    @property
    def blade_readings(self) -> dict[BladeSide, Inch]:
        return {
            "left": self.left_blade_reading,
            "right": self.right_blade_reading,
            "top": self.top_blade_reading,
            "bottom": self.bottom_blade_reading,
        }
