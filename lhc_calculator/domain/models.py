"""
Value models for the hospital cover delay calculation.

All models are frozen: they are built for a single calculation and never
mutated. No range constraints are enforced here; nonsensical values are
computed through and range checking is left to
:func:`lhc_calculator.core.validation.validate_inputs`.
"""

from typing import Optional

from pydantic import BaseModel, Field

from lhc_calculator.domain.enums import AgeWarning, Outcome, Recommendation


class MlsRateQuery(BaseModel):
    """Income profile used to select a Medicare Levy Surcharge tier."""

    income: float
    is_family: bool
    num_children: int = 0

    model_config = {"frozen": True}


class LoadingQuery(BaseModel):
    """Age profile used to determine the current LHC loading."""

    age: int
    is_immigrant: bool
    medicare_age: Optional[int] = Field(
        default=None,
        description="Age when Medicare was obtained (required for immigrants)",
    )

    model_config = {"frozen": True}


class DelayCostInput(BaseModel):
    """Full set of inputs for a delay cost calculation."""

    age: int
    income: float
    premium: float = Field(..., description="Base annual hospital premium")
    delay_years: float = Field(..., description="Years the purchase is postponed")
    is_family: bool = False
    is_immigrant: bool = False
    medicare_age: Optional[int] = None
    num_children: int = 0

    model_config = {"frozen": True}

    def mls_query(self) -> MlsRateQuery:
        """Project the MLS tier query."""
        return MlsRateQuery(
            income=self.income,
            is_family=self.is_family,
            num_children=self.num_children,
        )

    def loading_query(self) -> LoadingQuery:
        """Project the LHC loading query."""
        return LoadingQuery(
            age=self.age,
            is_immigrant=self.is_immigrant,
            medicare_age=self.medicare_age,
        )


class DelayCostResult(BaseModel):
    """
    Net cost of delaying and its three components.

    ``net_cost == loading_cost + mls_cost - saved_premium`` holds exactly.
    Positive net cost means delaying is more expensive than buying now.
    """

    net_cost: float
    loading_cost: float
    mls_cost: float
    saved_premium: float
    current_loading: float
    mls_rate: float

    model_config = {"frozen": True}


class BreakEvenQuery(BaseModel):
    """Inputs for the break-even income calculation."""

    premium: float
    current_loading: float
    mls_rate: float

    model_config = {"frozen": True}


class ValidationInput(BaseModel):
    """Raw numeric inputs checked by the validator."""

    age: float
    income: float
    premium: float
    delay_years: float

    model_config = {"frozen": True}


class MlsTier(BaseModel):
    """
    MLS tier with its income range, for display.

    The range is in whole dollars. `range_start` is display only: the
    exclusive lower bound of a tier is the previous threshold, so an income
    of 97000.50 sits in the tier shown as starting at $97,001.
    """

    rate: float
    tier_index: int = Field(..., ge=0, le=3)
    range_start: float
    range_end: float

    model_config = {"frozen": True}


class DelayScenario(BaseModel):
    """One row of a delay horizon comparison."""

    delay_years: float
    result: DelayCostResult
    recommendation: Recommendation
    is_best: bool = False

    model_config = {"frozen": True}


class RiskFactors(BaseModel):
    """What delaying puts at stake over the delay period."""

    delay_years: float
    mls_cost: float = Field(..., description="Surcharge paid while uncovered")
    loading_increase: float = Field(..., description="Extra LHC loading caused by the delay")

    model_config = {"frozen": True}


class DelayAnalysis(BaseModel):
    """Delay cost result with the derived presentation facts."""

    inputs: DelayCostInput
    result: DelayCostResult
    outcome: Outcome
    recommendation: Recommendation
    age_warning: AgeWarning
    mls_tier: MlsTier
    break_even_income: float
    risk_factors: RiskFactors

    model_config = {"frozen": True}
