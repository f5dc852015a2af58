"""Shared test fixtures."""

import pytest

from bordercalc.api.models import BorderCalculatorState
from bordercalc.config import CalculatorConfig


@pytest.fixture
def default_state():
    """35mm on 8x10 landscape with a half-inch border."""
    return BorderCalculatorState()


@pytest.fixture
def portrait_state():
    """8x10 portrait, 3:2 ratio, half-inch border."""
    return BorderCalculatorState(paper_size="8x10", aspect_ratio="3:2", min_border=0.5, is_landscape=False)


@pytest.fixture
def config():
    return CalculatorConfig()
