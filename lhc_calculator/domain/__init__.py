"""
Domain models for LHC Calculator.
"""

from lhc_calculator.domain.enums import AgeWarning, Language, Outcome, Recommendation
from lhc_calculator.domain.models import (
    BreakEvenQuery,
    DelayAnalysis,
    DelayCostInput,
    DelayCostResult,
    DelayScenario,
    LoadingQuery,
    MlsRateQuery,
    MlsTier,
    RiskFactors,
    ValidationInput,
)

__all__ = [
    "AgeWarning",
    "Language",
    "Outcome",
    "Recommendation",
    "BreakEvenQuery",
    "DelayAnalysis",
    "DelayCostInput",
    "DelayCostResult",
    "DelayScenario",
    "LoadingQuery",
    "MlsRateQuery",
    "MlsTier",
    "RiskFactors",
    "ValidationInput",
]
