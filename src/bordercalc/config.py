"""Configuration loading and validation."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "bordercalc.toml"


class CalculatorConfig(BaseModel):
    """
    Tunable constants for the border calculator.

    All parameters have sensible defaults. Override only what you need using Pydantic's model_copy():

        base = CalculatorConfig()
        wide = base.model_copy(update={"search_span": 1.0})
    """

    model_config = ConfigDict(frozen=True)

    # ========================================================================
    # Blade indicator
    # ========================================================================
    blade_thickness: int = Field(default=15, gt=0)
    """Blade indicator thickness at the reference paper size."""

    reference_paper_width: float = Field(default=20.0, gt=0)
    """Width of the reference paper (inches) used for thickness scaling."""

    reference_paper_height: float = Field(default=24.0, gt=0)
    """Height of the reference paper (inches) used for thickness scaling."""

    max_blade_scale: float = Field(default=2.0, gt=0)
    """Upper clamp on the thickness scale factor. There is no lower clamp."""

    # ========================================================================
    # Optimal border search
    # ========================================================================
    search_span: float = Field(default=0.5, gt=0)
    """Half-width of the candidate window around the starting border (inches)."""

    search_step: float = Field(default=0.01, gt=0)
    """Smallest step between candidates (inches)."""

    adaptive_step_divisor: int = Field(default=100, gt=0)
    """Window is divided into at most this many steps."""

    snap: float = Field(default=0.25, gt=0)
    """Ruler grid the searches align borders and print sides to (inches)."""

    min_search_border: float = Field(default=0.01, gt=0)
    """Smallest border the optimal search will consider (inches)."""

    quarter_tolerance: float = Field(default=0.0001, gt=0)
    """Tolerance when matching borders and print sides to the snap grid (inches)."""

    epsilon: float = Field(default=1e-9, gt=0)
    """Floating-point tolerance."""

    decimal_places: int = Field(default=2, ge=0)
    """Precision the optimal border is rounded to."""

    # ========================================================================
    # Preview
    # ========================================================================
    preview_max_width: float = Field(default=400.0, gt=0)
    """Maximum preview width in display units."""

    preview_max_height: float = Field(default=400.0, gt=0)
    """Maximum preview height in display units."""

    @property
    def reference_paper_area(self) -> float:
        """Area of the reference paper in square inches."""
        return self.reference_paper_width * self.reference_paper_height


DEFAULT_CONFIG = CalculatorConfig()


def load_config(config_path: Path | None = None) -> CalculatorConfig:
    """
    Load calculator configuration from a TOML file.

    Values are read from the ``[calculator]`` table; anything not set keeps
    its default.

    Args:
        config_path: Path to config file. If None, looks for bordercalc.toml in
            the current directory and falls back to defaults when it is absent.

    Returns:
        Validated CalculatorConfig object.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return DEFAULT_CONFIG

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info(f"Loading calculator config from {config_path}")
    with open(config_path, "rb") as f:
        try:
            config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    section = config_dict.get("calculator", {})
    if not isinstance(section, dict):
        raise ValueError(f"[calculator] in {config_path} must be a table")

    return CalculatorConfig(**section)
