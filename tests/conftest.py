"""
Shared test fixtures for LHC Calculator tests.
"""

import pytest

from lhc_calculator.config.models import CalculatorSettings
from lhc_calculator.domain.models import DelayCostInput


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> CalculatorSettings:
    """Default settings, unaffected by the environment."""
    return CalculatorSettings(
        default_premium=2000,
        default_delay_years=1,
        comparison_horizons=[1, 3, 5, 10],
        consider_threshold=3000,
        language="en",
        log_level="INFO",
        json_logs=False,
    )


# =============================================================================
# Input Fixtures
# =============================================================================


@pytest.fixture
def young_high_earner() -> DelayCostInput:
    """Age 28, $120,000 single, delaying 2 years."""
    return DelayCostInput(
        age=28,
        income=120000,
        premium=2000,
        delay_years=2,
        is_family=False,
        is_immigrant=False,
    )


@pytest.fixture
def adult_immigrant_family() -> DelayCostInput:
    """Age 42 family, Medicare at 39, $150,000, delaying 3 years."""
    return DelayCostInput(
        age=42,
        income=150000,
        premium=2000,
        delay_years=3,
        is_family=True,
        is_immigrant=True,
        medicare_age=39,
    )


@pytest.fixture
def middle_aged_high_earner() -> DelayCostInput:
    """Age 45, $180,000 single, delaying 5 years."""
    return DelayCostInput(
        age=45,
        income=180000,
        premium=2000,
        delay_years=5,
        is_family=False,
        is_immigrant=False,
    )
