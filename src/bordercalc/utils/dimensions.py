"""Paper, aspect ratio and easel catalogs."""

from dataclasses import dataclass as _dataclass


@_dataclass(frozen=True)
class Size:
    """A width × height pair in inches."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def transposed(self) -> "Size":
        """Return the same size rotated a quarter turn."""
        return Size(self.height, self.width)


@_dataclass(frozen=True)
class PaperSize:
    """Paper size specification (stored portrait)."""

    width: float   # inches
    height: float  # inches
    label: str     # display label


@_dataclass(frozen=True)
class AspectRatio:
    """Image aspect ratio, width:height."""

    width: float
    height: float
    label: str


@_dataclass(frozen=True)
class EaselSize:
    """Standard enlarging easel (stored landscape)."""

    width: float   # inches
    height: float  # inches
    label: str

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_size(self) -> Size:
        return Size(self.width, self.height)


CUSTOM = "custom"
EVEN_BORDERS = "even-borders"

# Registry of standard paper sizes
PAPER_SIZES = {
    "5x7": PaperSize(5.0, 7.0, "5x7"),
    "3.875x5.875": PaperSize(3.875, 5.875, "3⅞x5⅞ (postcard)"),
    "8x10": PaperSize(8.0, 10.0, "8x10"),
    "11x14": PaperSize(11.0, 14.0, "11x14"),
    "16x20": PaperSize(16.0, 20.0, "16x20"),
    "20x24": PaperSize(20.0, 24.0, "20x24"),
}

# Registry of aspect ratios. "even-borders" and "custom" have no fixed
# ratio and are resolved against the paper or the caller's values.
ASPECT_RATIOS = {
    "3:2": AspectRatio(3, 2, "35mm standard frame, 6x9 (3:2)"),
    "65:24": AspectRatio(65, 24, "XPan Pano (65:24)"),
    "4:3": AspectRatio(4, 3, "6x4.5/6x8/35mm Half Frame (4:3)"),
    "1:1": AspectRatio(1, 1, "6x6/Square (1:1)"),
    "7:6": AspectRatio(7, 6, "6x7"),
    "5:4": AspectRatio(5, 4, "4x5"),
    "7:5": AspectRatio(7, 5, "5x7"),
    "16:9": AspectRatio(16, 9, "HDTV (16:9)"),
    "1.37:1": AspectRatio(1.37, 1, "Academy Ratio (1.37:1)"),
    "1.85:1": AspectRatio(1.85, 1, "Widescreen (1.85:1)"),
    "2:1": AspectRatio(2, 1, "Univisium (2:1)"),
    "2.39:1": AspectRatio(2.39, 1, "CinemaScope (2.39:1)"),
    "2.76:1": AspectRatio(2.76, 1, "Ultra Panavision (2.76:1)"),
}

# Standard easel sizes, ordered by area ascending
EASEL_SIZES = (
    EaselSize(7.0, 5.0, "5x7"),
    EaselSize(10.0, 8.0, "8x10"),
    EaselSize(14.0, 11.0, "11x14"),
    EaselSize(20.0, 16.0, "16x20"),
    EaselSize(24.0, 20.0, "20x24"),
)

MAX_EASEL_DIMENSION = max(max(e.width, e.height) for e in EASEL_SIZES)

DEFAULT_PAPER_ID = "8x10"
DEFAULT_RATIO_ID = "3:2"


def get_paper_size(name: str) -> PaperSize:
    """
    Get paper size by catalog id.

    Args:
        name: Paper id (e.g., "8x10", "11x14").

    Returns:
        PaperSize object. Defaults to 8x10 if name not found.
    """
    return PAPER_SIZES.get(name.lower(), PAPER_SIZES[DEFAULT_PAPER_ID])


def get_aspect_ratio(name: str) -> AspectRatio:
    """
    Get aspect ratio by catalog id.

    Args:
        name: Ratio id (e.g., "3:2", "16:9").

    Returns:
        AspectRatio object. Defaults to 3:2 if name not found.
    """
    return ASPECT_RATIOS.get(name, ASPECT_RATIOS[DEFAULT_RATIO_ID])


def orient(width: float, height: float, landscape: bool) -> Size:
    """Return (width, height) swapped when landscape is set."""
    return Size(height, width) if landscape else Size(width, height)


def is_standard_easel_size(width: float, height: float) -> bool:
    """True when the size exactly matches a catalog easel in either axis order."""
    return any(
        (e.width == width and e.height == height) or (e.height == width and e.width == height)
        for e in EASEL_SIZES
    )


def format_size(width: float, height: float) -> str:
    """Format a size as '8×10', dropping trailing zeros."""
    return f"{width:g}×{height:g}"
