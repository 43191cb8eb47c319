"""
LHC Calculator
==============

Australian private hospital cover timing calculator.

Computes whether delaying the purchase of private hospital insurance costs
or saves money under the Medicare Levy Surcharge (MLS) and Lifetime Health
Cover (LHC) loading rules for the 2024-25 financial year.
"""

from lhc_calculator.config.regulatory import (
    InvalidInputError,
    determine_mls_rate,
    resolve_loading,
    resolve_mls_rate,
    resolve_mls_tier,
)
from lhc_calculator.core.calculator import (
    DelayCostCalculator,
    compute_break_even_income,
    compute_delay_cost,
)
from lhc_calculator.core.validation import validate_inputs
from lhc_calculator.utils.formatting import format_currency, format_percentage

__version__ = "0.1.0"
__author__ = "Easy Life Tools"

__all__ = [
    "InvalidInputError",
    "DelayCostCalculator",
    "compute_break_even_income",
    "compute_delay_cost",
    "determine_mls_rate",
    "format_currency",
    "format_percentage",
    "resolve_loading",
    "resolve_mls_rate",
    "resolve_mls_tier",
    "validate_inputs",
]
