"""
Core delay cost engine for LHC Calculator.
"""

from lhc_calculator.core.calculator import (
    DelayCostCalculator,
    age_warning,
    classify_outcome,
    compare_delay_scenarios,
    compute_break_even_income,
    compute_delay_cost,
    loading_increase,
    recommend,
    risk_factors,
)
from lhc_calculator.core.validation import validate_inputs

__all__ = [
    "DelayCostCalculator",
    "age_warning",
    "classify_outcome",
    "compare_delay_scenarios",
    "compute_break_even_income",
    "compute_delay_cost",
    "loading_increase",
    "recommend",
    "risk_factors",
    "validate_inputs",
]
