"""
Display formatting for currency amounts and rates.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float) -> str:
    """
    Format an amount as whole Australian dollars.

    The sign is dropped: callers decide how to present savings versus
    costs. Halves round away from zero.

    Examples:
        2000 -> "$2,000"
        -500 -> "$500"
    """
    if math.isinf(amount):
        return "$∞"

    # to_integral_value is not bounded by the context precision like quantize
    dollars = int(Decimal(str(abs(amount))).to_integral_value(rounding=ROUND_HALF_UP))
    return f"${dollars:,}"


def format_percentage(rate: float, for_loading: bool = False) -> str:
    """
    Format a fractional rate as a percentage.

    Loading rates drop a trailing ``.0`` (0.1 -> "10%"). MLS rates always
    keep at least one decimal and show two when needed
    (0.01 -> "1.0%", 0.0125 -> "1.25%").
    """
    if rate == 0:
        return "0%"

    percent = Decimal(str(rate)) * 100

    if for_loading:
        value = percent.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        if value == value.to_integral_value():
            return f"{int(value)}%"
        return f"{value}%"

    value = percent.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    one_decimal = value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if value == one_decimal:
        return f"{one_decimal}%"
    return f"{value}%"
