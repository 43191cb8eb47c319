"""
Delay cost calculation.

Net additional cost of delaying hospital cover by X years:

    net_cost = P * X * 0.2 + income * mls_rate * X - P * (1 + L0) * X

Where P is the base annual premium and L0 the current LHC loading.

Components:
1. P * X * 0.2: future premium increase from the extra loading
2. income * mls_rate * X: surcharge paid while uncovered
3. P * (1 + L0) * X: premium not paid while uncovered

A positive net cost means delaying costs more than buying now.
"""

from typing import Iterable, Optional

import structlog

from lhc_calculator.config.models import CalculatorSettings
from lhc_calculator.config.regulatory import (
    LHCLoadingCalculator,
    resolve_loading,
    resolve_mls_rate,
    resolve_mls_tier,
)
from lhc_calculator.domain.enums import AgeWarning, Outcome, Recommendation
from lhc_calculator.domain.models import (
    BreakEvenQuery,
    DelayAnalysis,
    DelayCostInput,
    DelayCostResult,
    DelayScenario,
    RiskFactors,
)

logger = structlog.get_logger()


# Flat proxy for the future premium increase per year of delay.
LOADING_INCREASE_FACTOR = 0.2

DEFAULT_CONSIDER_THRESHOLD = 3000
DEFAULT_COMPARISON_HORIZONS = (1, 3, 5, 10)


def compute_delay_cost(inputs: DelayCostInput) -> DelayCostResult:
    """
    Calculate the net additional cost of delaying hospital cover.

    No rounding is applied to any component.

    Args:
        inputs: Age, income, premium, delay horizon and household profile

    Returns:
        DelayCostResult with the net cost and its three components

    Raises:
        InvalidInputError: If an immigrant has no Medicare age
    """
    mls_rate = resolve_mls_rate(inputs.mls_query())
    current_loading = resolve_loading(inputs.loading_query())

    premium = inputs.premium
    delay_years = inputs.delay_years

    loading_cost = premium * delay_years * LOADING_INCREASE_FACTOR
    mls_cost = inputs.income * mls_rate * delay_years
    saved_premium = premium * (1 + current_loading) * delay_years
    net_cost = loading_cost + mls_cost - saved_premium

    logger.debug(
        "delay_cost_computed",
        delay_years=delay_years,
        mls_rate=mls_rate,
        current_loading=current_loading,
        net_cost=net_cost,
    )

    return DelayCostResult(
        net_cost=net_cost,
        loading_cost=loading_cost,
        mls_cost=mls_cost,
        saved_premium=saved_premium,
        current_loading=current_loading,
        mls_rate=mls_rate,
    )


def compute_break_even_income(query: BreakEvenQuery) -> float:
    """
    Calculate the income at which buying now and delaying cost the same.

        income = P * (1 + L0 - 0.2) / mls_rate

    Above this income delaying costs money. With no surcharge there is no
    break-even income and ``inf`` is returned.
    """
    if query.mls_rate == 0:
        return float("inf")

    return query.premium * (1 + query.current_loading - LOADING_INCREASE_FACTOR) / query.mls_rate


def classify_outcome(net_cost: float) -> Outcome:
    """Classify a net cost as saving, costing or breaking even."""
    if net_cost < 0:
        return Outcome.SAVES
    if net_cost > 0:
        return Outcome.COSTS
    return Outcome.BREAK_EVEN


def recommend(
    net_cost: float,
    consider_threshold: float = DEFAULT_CONSIDER_THRESHOLD,
) -> Recommendation:
    """
    Recommend whether to buy now.

    - Net cost of zero or less: can wait
    - Net cost up to the threshold: consider buying
    - Net cost above the threshold: buy now
    """
    if net_cost <= 0:
        return Recommendation.CAN_WAIT
    if net_cost <= consider_threshold:
        return Recommendation.CONSIDER
    return Recommendation.BUY_NOW


def age_warning(age: int) -> AgeWarning:
    """Get the age bracket warning for a person."""
    if age < 30:
        return AgeWarning.BUY_BEFORE_30
    if age < 40:
        return AgeWarning.HEALTH_CONSIDERATION
    return AgeWarning.HEALTH_RISK


def loading_increase(delay_years: float) -> float:
    """
    Get the extra LHC loading that a delay adds.

    Each year without cover past the base age adds 2%, up to the 70% cap.
    A 5 year delay adds 10%.
    """
    return min(
        max(0, delay_years) * LHCLoadingCalculator.LOADING_PER_YEAR,
        LHCLoadingCalculator.MAX_LOADING,
    )


def risk_factors(inputs: DelayCostInput, result: DelayCostResult) -> RiskFactors:
    """Summarise the surcharge paid and the loading added over the delay."""
    return RiskFactors(
        delay_years=inputs.delay_years,
        mls_cost=result.mls_cost,
        loading_increase=loading_increase(inputs.delay_years),
    )


def compare_delay_scenarios(
    inputs: DelayCostInput,
    horizons: Iterable[float] = DEFAULT_COMPARISON_HORIZONS,
    consider_threshold: float = DEFAULT_CONSIDER_THRESHOLD,
) -> list[DelayScenario]:
    """
    Calculate the delay cost for several delay horizons.

    The horizon with the lowest net cost is flagged as the best option.
    On ties the shortest horizon listed first wins.

    Args:
        inputs: Base inputs; ``delay_years`` is replaced per horizon
        horizons: Delay years to compare
        consider_threshold: Threshold passed to :func:`recommend`

    Returns:
        One DelayScenario per horizon, in the given order
    """
    results = [
        (years, compute_delay_cost(inputs.model_copy(update={"delay_years": years})))
        for years in horizons
    ]
    if not results:
        return []

    best_index = min(range(len(results)), key=lambda i: results[i][1].net_cost)

    return [
        DelayScenario(
            delay_years=years,
            result=result,
            recommendation=recommend(result.net_cost, consider_threshold),
            is_best=index == best_index,
        )
        for index, (years, result) in enumerate(results)
    ]


class DelayCostCalculator:
    """
    Combined delay cost analysis.

    Provides a unified interface for the delay cost, recommendation, age
    warning, MLS tier and break-even income of one set of inputs.

    Usage:
        calc = DelayCostCalculator()
        analysis = calc.analyse(inputs)
    """

    def __init__(self, settings: Optional[CalculatorSettings] = None):
        """
        Initialize the calculator.

        Args:
            settings: Optional settings for the recommendation threshold and
                      comparison horizons. Defaults are used if not provided.
        """
        self.settings = settings or CalculatorSettings()

    def analyse(self, inputs: DelayCostInput) -> DelayAnalysis:
        """
        Analyse one delay decision.

        Raises:
            InvalidInputError: If an immigrant has no Medicare age
        """
        result = compute_delay_cost(inputs)
        break_even = compute_break_even_income(
            BreakEvenQuery(
                premium=inputs.premium,
                current_loading=result.current_loading,
                mls_rate=result.mls_rate,
            )
        )

        analysis = DelayAnalysis(
            inputs=inputs,
            result=result,
            outcome=classify_outcome(result.net_cost),
            recommendation=recommend(result.net_cost, self.settings.consider_threshold),
            age_warning=age_warning(inputs.age),
            mls_tier=resolve_mls_tier(inputs.mls_query()),
            break_even_income=break_even,
            risk_factors=risk_factors(inputs, result),
        )

        logger.debug(
            "delay_analysed",
            delay_years=inputs.delay_years,
            net_cost=result.net_cost,
            recommendation=analysis.recommendation.value,
        )
        return analysis

    def compare(
        self,
        inputs: DelayCostInput,
        horizons: Optional[Iterable[float]] = None,
    ) -> list[DelayScenario]:
        """Compare delay horizons, using the configured horizons by default."""
        if horizons is None:
            horizons = self.settings.comparison_horizons
        return compare_delay_scenarios(inputs, horizons, self.settings.consider_threshold)
