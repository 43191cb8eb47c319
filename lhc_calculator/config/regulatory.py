"""
Regulatory calculations for Australian private hospital cover timing.

Implements, for the 2024-25 financial year:
- Medicare Levy Surcharge (MLS) tier lookup
- Lifetime Health Cover (LHC) loading for Australian-born people and
  adult immigrants
"""

import structlog

from lhc_calculator.domain.models import LoadingQuery, MlsRateQuery, MlsTier

logger = structlog.get_logger()


FINANCIAL_YEAR = "2024-25"

# Inclusive upper bounds of tiers 0, 1 and 2. Anything above the last
# threshold is tier 3.
MLS_THRESHOLDS = {
    "single": (97000, 113000, 151000),
    "family": (194000, 226000, 302000),
}

MLS_RATES = (0, 0.01, 0.0125, 0.015)

# Family thresholds rise by this amount for every dependent child.
CHILD_THRESHOLD_ADJUSTMENT = 1500


class InvalidInputError(ValueError):
    """Raised when a required input is missing for the calculation."""

    pass


class MLSRateCalculator:
    """
    Medicare Levy Surcharge (MLS) rate calculator.

    MLS is levied on people earning above the base tier threshold who do
    not hold private hospital cover.

    Thresholds (2024-25):
    - Single: $97,000 / $113,000 / $151,000
    - Family: $194,000 / $226,000 / $302,000, plus $1,500 per child

    Each threshold is the inclusive upper bound of its tier:
    - Base: 0%
    - Tier 1: 1.0%
    - Tier 2: 1.25%
    - Tier 3: 1.5%

    Usage:
        calc = MLSRateCalculator()
        rate = calc.calculate_rate(MlsRateQuery(income=120000, is_family=False))
    """

    THRESHOLDS = MLS_THRESHOLDS
    RATES = MLS_RATES
    CHILD_ADJUSTMENT = CHILD_THRESHOLD_ADJUSTMENT

    def thresholds(self, is_family: bool, num_children: int = 0) -> tuple[float, ...]:
        """
        Get the tier thresholds for a household.

        Every child raises the family thresholds. Single thresholds are
        never adjusted.
        """
        if is_family:
            adjustment = num_children * self.CHILD_ADJUSTMENT
            return tuple(t + adjustment for t in self.THRESHOLDS["family"])
        return self.THRESHOLDS["single"]

    def _tier_index(self, income: float, thresholds: tuple[float, ...]) -> int:
        for index, threshold in enumerate(thresholds):
            if income <= threshold:
                return index
        return len(thresholds)

    def calculate_rate(self, query: MlsRateQuery) -> float:
        """
        Calculate the MLS rate for an income profile.

        Args:
            query: Income, family status and number of children

        Returns:
            One of 0, 0.01, 0.0125 or 0.015
        """
        thresholds = self.thresholds(query.is_family, query.num_children)
        return self.RATES[self._tier_index(query.income, thresholds)]

    def calculate_tier(self, query: MlsRateQuery) -> MlsTier:
        """
        Calculate the MLS tier with its income range.

        The range is shown in whole dollars: tier 2 for a single person runs
        from $113,001 to $151,000. Membership is decided by the thresholds
        alone, so $113,000.50 is tier 2 as well. The top tier has no upper
        bound.
        """
        thresholds = self.thresholds(query.is_family, query.num_children)
        index = self._tier_index(query.income, thresholds)

        range_start = 0 if index == 0 else thresholds[index - 1] + 1
        range_end = thresholds[index] if index < len(thresholds) else float("inf")

        return MlsTier(
            rate=self.RATES[index],
            tier_index=index,
            range_start=range_start,
            range_end=range_end,
        )

    def tier_table(self, is_family: bool, num_children: int = 0) -> list[MlsTier]:
        """Get all four tiers for a household, lowest first."""
        thresholds = self.thresholds(is_family, num_children)
        return [
            self.calculate_tier(
                MlsRateQuery(income=start, is_family=is_family, num_children=num_children)
            )
            for start in [0, *(t + 1 for t in thresholds)]
        ]


class LHCLoadingCalculator:
    """
    Lifetime Health Cover (LHC) loading calculator.

    Rules:
    - Australian born or childhood immigrant: base age 30
    - Adult immigrant: base age is the age Medicare was obtained plus a
      one-year grace period
    - Loading: 2% for each full year past the base age
    - Maximum loading: 70%

    Usage:
        calc = LHCLoadingCalculator()
        loading = calc.calculate_loading(LoadingQuery(age=35, is_immigrant=False))
    """

    BASE_AGE = 30
    GRACE_PERIOD_YEARS = 1
    LOADING_PER_YEAR = 0.02
    MAX_LOADING = 0.7

    def base_age(self, query: LoadingQuery) -> int:
        """
        Get the age after which loading accrues.

        Raises:
            InvalidInputError: If an immigrant has no Medicare age
        """
        if not query.is_immigrant:
            return self.BASE_AGE

        if query.medicare_age is None:
            logger.warning("loading_input_invalid", age=query.age, reason="missing_medicare_age")
            raise InvalidInputError("medicare_age is required for immigrants")

        return query.medicare_age + self.GRACE_PERIOD_YEARS

    def calculate_loading(self, query: LoadingQuery) -> float:
        """
        Calculate the current LHC loading.

        Args:
            query: Age, immigration status and Medicare age

        Returns:
            Loading as a fraction between 0 and 0.7

        Raises:
            InvalidInputError: If an immigrant has no Medicare age
        """
        years_late = max(0, query.age - self.base_age(query))
        return min(years_late * self.LOADING_PER_YEAR, self.MAX_LOADING)


_mls_calculator = MLSRateCalculator()
_lhc_calculator = LHCLoadingCalculator()


def resolve_mls_rate(query: MlsRateQuery) -> float:
    """Resolve the MLS rate for an income profile."""
    return _mls_calculator.calculate_rate(query)


def resolve_mls_tier(query: MlsRateQuery) -> MlsTier:
    """Resolve the MLS tier and its income range for an income profile."""
    return _mls_calculator.calculate_tier(query)


def mls_tier_table(is_family: bool, num_children: int = 0) -> list[MlsTier]:
    """Get the four MLS tiers for a household."""
    return _mls_calculator.tier_table(is_family, num_children)


def resolve_loading(query: LoadingQuery) -> float:
    """Resolve the current LHC loading for an age profile."""
    return _lhc_calculator.calculate_loading(query)


def determine_mls_rate(income: float, is_family: bool, num_children: int = 0) -> float:
    """Shorthand for :func:`resolve_mls_rate` taking plain arguments."""
    return resolve_mls_rate(
        MlsRateQuery(income=income, is_family=is_family, num_children=num_children)
    )
