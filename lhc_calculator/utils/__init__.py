"""
Utility modules for LHC Calculator.
"""

from lhc_calculator.utils.formatting import format_currency, format_percentage
from lhc_calculator.utils.labels import format_years, get_label
from lhc_calculator.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "format_currency",
    "format_percentage",
    "format_years",
    "get_label",
    "get_logger",
]
