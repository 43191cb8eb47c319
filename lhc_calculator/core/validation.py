"""
Input range validation.

Findings are returned as messages for the caller to display; nothing here
raises. The calculation functions accept any values regardless of these
checks.
"""

from lhc_calculator.domain.models import ValidationInput


AGE_RANGE = (18, 100)
PREMIUM_RANGE = (500, 10000)
DELAY_YEARS_RANGE = (0, 30)


def validate_inputs(inputs: ValidationInput) -> list[str]:
    """
    Validate input ranges.

    Every check runs, in the order age, income, premium, delay years.

    Args:
        inputs: Age, income, premium and delay years

    Returns:
        List of error messages (empty if all valid)
    """
    errors: list[str] = []

    if inputs.age < AGE_RANGE[0] or inputs.age > AGE_RANGE[1]:
        errors.append("Age must be between 18-100")

    if inputs.income < 0:
        errors.append("Income cannot be negative")

    if inputs.premium < PREMIUM_RANGE[0] or inputs.premium > PREMIUM_RANGE[1]:
        errors.append("Premium should be between $500-$10,000")

    if inputs.delay_years < DELAY_YEARS_RANGE[0] or inputs.delay_years > DELAY_YEARS_RANGE[1]:
        errors.append("Delay years should be between 0-30")

    return errors
