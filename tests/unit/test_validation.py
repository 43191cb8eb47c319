"""
Unit tests for input range validation.
"""

import pytest

from lhc_calculator.core.validation import validate_inputs
from lhc_calculator.domain.models import ValidationInput


def check(age=30, income=100000, premium=2000, delay_years=1) -> list[str]:
    return validate_inputs(
        ValidationInput(age=age, income=income, premium=premium, delay_years=delay_years)
    )


class TestValidateInputs:
    """Tests for validate_inputs."""

    def test_valid_inputs(self):
        assert check(age=30, income=100000, premium=2000, delay_years=5) == []

    @pytest.mark.parametrize("age", [17, 101])
    def test_age_out_of_range(self, age):
        assert check(age=age) == ["Age must be between 18-100"]

    @pytest.mark.parametrize("age", [18, 100])
    def test_age_bounds_inclusive(self, age):
        assert check(age=age) == []

    def test_negative_income(self):
        assert check(income=-1) == ["Income cannot be negative"]

    def test_zero_income_is_valid(self):
        assert check(income=0) == []

    @pytest.mark.parametrize("premium", [499, 10001])
    def test_premium_out_of_range(self, premium):
        assert check(premium=premium) == ["Premium should be between $500-$10,000"]

    @pytest.mark.parametrize("premium", [500, 10000])
    def test_premium_bounds_inclusive(self, premium):
        assert check(premium=premium) == []

    @pytest.mark.parametrize("delay_years", [-1, 31])
    def test_delay_years_out_of_range(self, delay_years):
        assert check(delay_years=delay_years) == ["Delay years should be between 0-30"]

    @pytest.mark.parametrize("delay_years", [0, 30])
    def test_delay_years_bounds_inclusive(self, delay_years):
        assert check(delay_years=delay_years) == []

    def test_all_checks_run_in_order(self):
        """Every failing rule is reported, in a fixed order."""
        errors = check(age=17, income=-100, premium=100, delay_years=50)

        assert errors == [
            "Age must be between 18-100",
            "Income cannot be negative",
            "Premium should be between $500-$10,000",
            "Delay years should be between 0-30",
        ]
