"""
Unit tests for MLS rate and LHC loading calculations.
"""

import pytest

from lhc_calculator.config.regulatory import (
    InvalidInputError,
    LHCLoadingCalculator,
    MLSRateCalculator,
    determine_mls_rate,
    mls_tier_table,
    resolve_loading,
    resolve_mls_rate,
    resolve_mls_tier,
)
from lhc_calculator.domain.models import LoadingQuery, MlsRateQuery


def single(income: float) -> MlsRateQuery:
    return MlsRateQuery(income=income, is_family=False)


def family(income: float, num_children: int = 0) -> MlsRateQuery:
    return MlsRateQuery(income=income, is_family=True, num_children=num_children)


class TestMLSRateSingle:
    """Tests for single person MLS thresholds."""

    @pytest.mark.parametrize("income", [0, 50000, 97000])
    def test_base_tier(self, income):
        """Income up to $97,000 pays no surcharge."""
        assert resolve_mls_rate(single(income)) == 0

    @pytest.mark.parametrize("income", [97001, 100000, 113000])
    def test_tier_1(self, income):
        """$97,001 - $113,000 is 1.0%."""
        assert resolve_mls_rate(single(income)) == 0.01

    @pytest.mark.parametrize("income", [113001, 120000, 151000])
    def test_tier_2(self, income):
        """$113,001 - $151,000 is 1.25%."""
        assert resolve_mls_rate(single(income)) == 0.0125

    @pytest.mark.parametrize("income", [151001, 180000, 250000])
    def test_tier_3(self, income):
        """Above $151,000 is 1.5%."""
        assert resolve_mls_rate(single(income)) == 0.015

    def test_upper_bound_is_inclusive(self):
        """A threshold belongs to the tier below it."""
        assert resolve_mls_rate(single(113000)) == 0.01
        assert resolve_mls_rate(single(113001)) == 0.0125

    def test_negative_income_is_base_tier(self):
        """Negative income is not rejected and pays no surcharge."""
        assert resolve_mls_rate(single(-5000)) == 0

    def test_children_do_not_adjust_single_thresholds(self):
        """Child adjustment applies to family thresholds only."""
        query = MlsRateQuery(income=97001, is_family=False, num_children=3)
        assert resolve_mls_rate(query) == 0.01


class TestMLSRateFamily:
    """Tests for family MLS thresholds."""

    def test_base_tier(self):
        """Income up to $194,000 pays no surcharge."""
        assert resolve_mls_rate(family(150000)) == 0
        assert resolve_mls_rate(family(194000)) == 0

    def test_tier_1(self):
        assert resolve_mls_rate(family(194001)) == 0.01
        assert resolve_mls_rate(family(226000)) == 0.01

    def test_tier_2(self):
        assert resolve_mls_rate(family(226001)) == 0.0125
        assert resolve_mls_rate(family(302000)) == 0.0125

    def test_tier_3(self):
        assert resolve_mls_rate(family(302001)) == 0.015

    def test_every_child_raises_thresholds(self):
        """Thresholds rise $1,500 for every child, not only beyond two."""
        assert resolve_mls_rate(family(195000, num_children=1)) == 0
        assert resolve_mls_rate(family(195501, num_children=1)) == 0.01
        assert resolve_mls_rate(family(197000, num_children=2)) == 0
        assert resolve_mls_rate(family(197001, num_children=2)) == 0.01

    def test_child_adjustment_applies_to_every_threshold(self):
        calc = MLSRateCalculator()

        assert calc.thresholds(is_family=True, num_children=2) == (197000, 229000, 305000)


class TestMLSTier:
    """Tests for MLS tier metadata."""

    def test_tier_2_single_range(self):
        """Tier 2 for a single person runs from $113,001 to $151,000."""
        tier = resolve_mls_tier(single(120000))

        assert tier.tier_index == 2
        assert tier.rate == 0.0125
        assert tier.range_start == 113001
        assert tier.range_end == 151000

    def test_base_tier_starts_at_zero(self):
        tier = resolve_mls_tier(single(50000))

        assert tier.tier_index == 0
        assert tier.range_start == 0
        assert tier.range_end == 97000

    def test_top_tier_is_unbounded(self):
        tier = resolve_mls_tier(family(400000))

        assert tier.tier_index == 3
        assert tier.range_start == 302001
        assert tier.range_end == float("inf")

    def test_fractional_income_above_threshold(self):
        """Cents above a threshold move to the next tier, whose display range starts a dollar up."""
        tier = resolve_mls_tier(single(97000.5))

        assert tier.tier_index == 1
        assert tier.rate == 0.01
        assert tier.range_start == 97001
        assert tier.range_start - 1 < 97000.5 <= tier.range_end

    def test_tier_rate_matches_resolver(self):
        """Tier metadata and rate lookup share the same thresholds."""
        for income in [0, 97000, 97001, 113000, 113001, 151000, 151001, 500000]:
            for query in (single(income), family(income, num_children=3)):
                assert resolve_mls_tier(query).rate == resolve_mls_rate(query)

    def test_tier_table(self):
        table = mls_tier_table(is_family=True, num_children=1)

        assert [tier.tier_index for tier in table] == [0, 1, 2, 3]
        assert [tier.rate for tier in table] == [0, 0.01, 0.0125, 0.015]
        assert table[1].range_start == 195501
        assert table[1].range_end == 227500


class TestDetermineMlsRate:
    """Tests for the plain-argument shorthand."""

    def test_matches_resolver(self):
        assert determine_mls_rate(120000, False) == 0.0125
        assert determine_mls_rate(200000, True) == 0.01
        assert determine_mls_rate(195000, True, num_children=1) == 0


class TestLHCLoading:
    """Tests for LHC loading of Australian born people."""

    @pytest.mark.parametrize("age", [18, 25, 29, 30])
    def test_no_loading_up_to_30(self, age):
        assert resolve_loading(LoadingQuery(age=age, is_immigrant=False)) == 0

    @pytest.mark.parametrize(
        "age, expected",
        [(31, 0.02), (35, 0.1), (40, 0.2), (50, 0.4)],
    )
    def test_two_percent_per_year_after_30(self, age, expected):
        assert resolve_loading(LoadingQuery(age=age, is_immigrant=False)) == expected

    @pytest.mark.parametrize("age", [65, 70, 100])
    def test_max_loading_is_70_percent(self, age):
        assert resolve_loading(LoadingQuery(age=age, is_immigrant=False)) == 0.7

    def test_nonsense_age_is_computed_through(self):
        """Ages outside the valid range are not rejected."""
        assert resolve_loading(LoadingQuery(age=-5, is_immigrant=False)) == 0

    def test_medicare_age_ignored_for_non_immigrants(self):
        query = LoadingQuery(age=35, is_immigrant=False, medicare_age=34)
        assert resolve_loading(query) == 0.1


class TestLHCLoadingImmigrant:
    """Tests for LHC loading of adult immigrants."""

    def test_no_loading_within_grace_period(self):
        """Got Medicare at 39: no loading at 39 or 40."""
        assert resolve_loading(LoadingQuery(age=39, is_immigrant=True, medicare_age=39)) == 0
        assert resolve_loading(LoadingQuery(age=40, is_immigrant=True, medicare_age=39)) == 0

    @pytest.mark.parametrize(
        "age, expected",
        [(41, 0.02), (42, 0.04), (45, 0.1)],
    )
    def test_loading_after_grace_period(self, age, expected):
        query = LoadingQuery(age=age, is_immigrant=True, medicare_age=39)
        assert resolve_loading(query) == expected

    def test_capped_at_70_percent(self):
        query = LoadingQuery(age=75, is_immigrant=True, medicare_age=39)
        assert resolve_loading(query) == 0.7

    def test_base_age_includes_grace_period(self):
        calc = LHCLoadingCalculator()
        query = LoadingQuery(age=42, is_immigrant=True, medicare_age=39)

        assert calc.base_age(query) == 40

    def test_missing_medicare_age_raises(self):
        """Immigrants must provide the age Medicare was obtained."""
        with pytest.raises(InvalidInputError, match="medicare_age"):
            resolve_loading(LoadingQuery(age=42, is_immigrant=True))

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_loading(LoadingQuery(age=42, is_immigrant=True, medicare_age=None))


class TestPurity:
    """Resolvers return the same output for the same input."""

    def test_repeated_calls_agree(self):
        mls_query = family(250000, num_children=2)
        loading_query = LoadingQuery(age=44, is_immigrant=True, medicare_age=35)

        assert resolve_mls_rate(mls_query) == resolve_mls_rate(mls_query)
        assert resolve_mls_tier(mls_query) == resolve_mls_tier(mls_query)
        assert resolve_loading(loading_query) == resolve_loading(loading_query)
