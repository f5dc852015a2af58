"""Type aliases used across the bordercalc package."""

from typing import Literal

# Measurements
Inch = float
Percent = float

# Catalog identifiers ("custom" selects the caller-supplied width/height)
PaperId = str
RatioId = str

# Easel blade positions
BladeSide = Literal["left", "right", "top", "bottom"]
