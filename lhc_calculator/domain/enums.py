"""
Enumeration types for LHC Calculator domain models.
"""

from enum import Enum


class Recommendation(str, Enum):
    """Purchase recommendation derived from the net cost of delaying."""
    CAN_WAIT = "can-wait"        # Delaying saves money (or breaks even)
    CONSIDER = "consider"        # Delaying costs a moderate amount
    BUY_NOW = "buy-now"          # Delaying costs more than the threshold


class Outcome(str, Enum):
    """Sign of the net cost of delaying."""
    SAVES = "saves"
    COSTS = "costs"
    BREAK_EVEN = "break-even"


class AgeWarning(str, Enum):
    """Age bracket warning shown alongside a result."""
    BUY_BEFORE_30 = "buy-before-30"
    HEALTH_CONSIDERATION = "health-consideration"
    HEALTH_RISK = "health-risk"


class Language(str, Enum):
    """Display language for labels."""
    ENGLISH = "en"
    CHINESE = "zh"
