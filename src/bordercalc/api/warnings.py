"""Advisory warnings surfaced alongside a calculation."""

from dataclasses import dataclass

from bordercalc.geometry.blades import has_negative_reading
from bordercalc.geometry.easel import EaselFit
from bordercalc.geometry.print_size import Borders, OffsetClamp
from bordercalc.utils.dimensions import MAX_EASEL_DIMENSION, Size, format_size

BLADE_WARNING = (
    "Negative blade reading: this easel has no markings below zero. "
    "Position the paper in the slot fully to one side and measure from that edge."
)


@dataclass(frozen=True)
class WarningSet:
    """The four independent warnings. None means no warning."""

    offset: str | None = None
    blade: str | None = None
    min_border: str | None = None
    paper_size: str | None = None

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(w for w in (self.offset, self.blade, self.min_border, self.paper_size) if w)


def offset_warning(clamp: OffsetClamp, ignore_min_border: bool) -> str | None:
    """Describe which offsets were pulled back, if any."""
    axes = []
    if clamp.horizontal_clamped:
        axes.append("Horizontal")
    if clamp.vertical_clamped:
        axes.append("Vertical")
    if not axes:
        return None

    subject = axes[0] if len(axes) == 1 else "Horizontal and vertical"
    noun = "offset exceeds" if len(axes) == 1 else "offsets exceed"
    if ignore_min_border:
        return f"{subject} {noun} available space; adjusted to keep print on paper."
    return f"{subject} {noun} available space; adjusted to honour min-border."


def blade_warning(readings: Borders) -> str | None:
    return BLADE_WARNING if has_negative_reading(readings) else None


def min_border_conflict_warning(borders: Borders, min_border: float, epsilon: float = 1e-9) -> str | None:
    """Warn when offsets have pushed the print inside the minimum border."""
    smallest = min(borders.left, borders.right, borders.top, borders.bottom)
    if smallest >= min_border - epsilon:
        return None
    return (
        f"Offsets move the print {min_border - smallest:.3g}\" inside the "
        f"{min_border:g}\" minimum border."
    )


def paper_size_warning(paper: Size, fit: EaselFit) -> str | None:
    """Explain how to place paper that does not match a standard easel."""
    if not fit.is_non_standard:
        return None
    size = format_size(paper.width, paper.height)
    if fit.is_fallback:
        return (
            f"Paper ({size}) exceeds the largest standard easel ({MAX_EASEL_DIMENSION:g}\"). "
            "Position the paper in the easel slot fully to one side."
        )
    return (
        f"Non-standard paper size ({size}). Center it in the {fit.label} easel slot; "
        "blade readings include the paper shift."
    )


def collect_warnings(
    clamp: OffsetClamp,
    readings: Borders,
    borders: Borders,
    fit: EaselFit,
    paper: Size,
    min_border: float,
    ignore_min_border: bool,
    min_border_warning: str | None = None,
    paper_warning: str | None = None,
) -> WarningSet:
    """
    Gather every advisory condition from the pipeline stages.

    A min-border validation warning takes precedence over the offset
    conflict warning, and an invalid-paper warning over the easel guidance.
    """
    if min_border_warning is None and ignore_min_border:
        min_border_warning = min_border_conflict_warning(borders, min_border)

    return WarningSet(
        offset=offset_warning(clamp, ignore_min_border),
        blade=blade_warning(readings),
        min_border=min_border_warning,
        paper_size=paper_warning or paper_size_warning(paper, fit),
    )
