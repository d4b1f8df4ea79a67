# tests/services/valuation/test_calculators.py
"""
Unit tests for valuation calculators.

These tests exercise each calculator on its own, with subscriptions built
directly rather than through SubscriptionService.

Test Coverage:
- SubscriptionValidator: principal and date checks
- ElapsedPeriodsCalculator: whole days / months / years, clamping, leap-day cap
- MaturityCalculator: full-duration compounding
- CurrentValueCalculator: compounding before maturity, stored amount after
- ProgressCalculator: clamped progress, days remaining
- compound(): the shared formula
"""

from datetime import date
from decimal import Decimal

import pytest

from policyfolio.models import Policy, PolicyType, Subscription
from policyfolio.services.exceptions import InvalidSubscriptionError
from policyfolio.services.valuation.calculators import (
    CurrentValueCalculator,
    ElapsedPeriodsCalculator,
    MaturityCalculator,
    ProgressCalculator,
    SubscriptionValidator,
    compound,
)
from policyfolio.services.valuation.rates import RateModel


# =============================================================================
# HELPERS
# =============================================================================

def build_subscription(
        principal: str = "10000",
        start_date: date = date(2024, 1, 1),
        maturity_date: date = date(2026, 1, 1),
        expected_maturity_amount: str = "12000",
) -> Subscription:
    return Subscription(
        subscription_id="SUB-CALC",
        customer_id=None,
        policy_id=None,
        principal=Decimal(principal),
        start_date=start_date,
        maturity_date=maturity_date,
        expected_maturity_amount=Decimal(expected_maturity_amount),
    )


@pytest.fixture
def rate_model() -> RateModel:
    return RateModel()


# =============================================================================
# VALIDATOR TESTS
# =============================================================================

class TestSubscriptionValidator:
    """Tests for structural subscription checks."""

    def test_valid_subscription_passes(self):
        SubscriptionValidator().validate(build_subscription())

    @pytest.mark.parametrize("principal", ["0", "-1", "-5000.00"])
    def test_non_positive_principal_rejected(self, principal):
        with pytest.raises(InvalidSubscriptionError) as exc_info:
            SubscriptionValidator().validate(build_subscription(principal=principal))

        assert exc_info.value.field == "principal"
        assert exc_info.value.subscription_id == "SUB-CALC"

    def test_maturity_equal_to_start_rejected(self):
        subscription = build_subscription(
            start_date=date(2024, 1, 1),
            maturity_date=date(2024, 1, 1),
        )
        with pytest.raises(InvalidSubscriptionError) as exc_info:
            SubscriptionValidator().validate(subscription)

        assert exc_info.value.field == "maturity_date"

    def test_maturity_before_start_rejected(self):
        subscription = build_subscription(
            start_date=date(2024, 6, 1),
            maturity_date=date(2024, 1, 1),
        )
        with pytest.raises(InvalidSubscriptionError):
            SubscriptionValidator().validate(subscription)

    def test_message_names_subscription(self):
        with pytest.raises(InvalidSubscriptionError, match="Subscription SUB-CALC"):
            SubscriptionValidator().validate(build_subscription(principal="0"))


# =============================================================================
# ELAPSED PERIODS TESTS
# =============================================================================

class TestElapsedPeriodsCalculator:
    """Tests for whole-period counting."""

    def test_daily_counts_calendar_days(self, rate_model, daily_policy):
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription()

        assert calc.calculate(daily_policy, subscription, date(2024, 1, 31)) == 30

    def test_daily_counts_leap_day(self, rate_model, daily_policy):
        """Feb 29 is a compounding day like any other."""
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription()

        assert calc.calculate(daily_policy, subscription, date(2024, 3, 1)) == 60

    def test_monthly_counts_whole_months_only(self, rate_model, monthly_policy):
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription(start_date=date(2024, 1, 15))

        assert calc.calculate(monthly_policy, subscription, date(2024, 7, 14)) == 5
        assert calc.calculate(monthly_policy, subscription, date(2024, 7, 15)) == 6

    def test_lumpsum_counts_whole_years_only(self, rate_model, lumpsum_policy):
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription(
            start_date=date(2021, 1, 1),
            maturity_date=date(2024, 1, 1),
        )

        assert calc.calculate(lumpsum_policy, subscription, date(2023, 12, 31)) == 2
        assert calc.calculate(lumpsum_policy, subscription, date(2023, 1, 1)) == 2

    def test_before_start_is_zero(self, rate_model, daily_policy):
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription()

        assert calc.calculate(daily_policy, subscription, date(2023, 12, 1)) == 0

    def test_capped_at_full_duration(self, rate_model):
        """A 1-year daily term starting in a leap year spans 366 days but compounds 365."""
        policy = Policy(
            policy_type=PolicyType.DAILY,
            duration_years=1,
            annual_rate_percent=Decimal("7.3"),
        )
        subscription = build_subscription(
            start_date=date(2024, 1, 1),
            maturity_date=date(2025, 1, 1),
        )
        calc = ElapsedPeriodsCalculator(rate_model)

        assert calc.calculate(policy, subscription, date(2024, 12, 31)) == 365
        assert calc.calculate(policy, subscription, date(2025, 1, 1)) == 365

    def test_stops_at_maturity(self, rate_model, monthly_policy):
        calc = ElapsedPeriodsCalculator(rate_model)
        subscription = build_subscription()

        assert calc.calculate(monthly_policy, subscription, date(2030, 1, 1)) == 24


# =============================================================================
# MATURITY TESTS
# =============================================================================

class TestMaturityCalculator:
    """Tests for full-duration compounding."""

    def test_lumpsum_three_years_at_eight_percent(self, rate_model, lumpsum_policy):
        """10000 × 1.08^3 = 12597.12 exactly."""
        result = MaturityCalculator(rate_model).calculate(lumpsum_policy, Decimal("10000"))

        assert result == Decimal("12597.12")

    def test_monthly_uses_duration_times_twelve(self, rate_model, monthly_policy):
        result = MaturityCalculator(rate_model).calculate(monthly_policy, Decimal("1000"))

        assert result == Decimal("1000") * Decimal("1.005") ** 24

    def test_daily_uses_duration_times_365(self, rate_model, daily_policy):
        result = MaturityCalculator(rate_model).calculate(daily_policy, Decimal("1000"))

        assert result == Decimal("1000") * Decimal("1.0002") ** 730

    def test_zero_rate_returns_principal(self, rate_model):
        policy = Policy(
            policy_type=PolicyType.LUMPSUM,
            duration_years=5,
            annual_rate_percent=Decimal("0"),
        )
        result = MaturityCalculator(rate_model).calculate(policy, Decimal("2500"))

        assert result == Decimal("2500")


# =============================================================================
# CURRENT VALUE TESTS
# =============================================================================

class TestCurrentValueCalculator:
    """Tests for value at an arbitrary date."""

    def test_compounds_elapsed_periods(self, rate_model, monthly_policy):
        calc = CurrentValueCalculator(rate_model)
        subscription = build_subscription(principal="12000", start_date=date(2024, 1, 15),
                                          maturity_date=date(2026, 1, 15))

        value = calc.calculate(monthly_policy, subscription, date(2024, 7, 15))

        assert value == Decimal("12000") * Decimal("1.005") ** 6

    def test_value_at_start_is_principal(self, rate_model, daily_policy):
        calc = CurrentValueCalculator(rate_model)
        subscription = build_subscription()

        assert calc.calculate(daily_policy, subscription, date(2024, 1, 1)) == Decimal("10000")

    def test_matured_returns_stored_amount(self, rate_model, lumpsum_policy):
        """The stored expected amount wins over a recomputation."""
        calc = CurrentValueCalculator(rate_model)
        subscription = build_subscription(
            start_date=date(2021, 1, 1),
            maturity_date=date(2024, 1, 1),
            expected_maturity_amount="99999.99",
        )

        assert calc.calculate(lumpsum_policy, subscription, date(2024, 1, 1)) == Decimal("99999.99")
        assert calc.calculate(lumpsum_policy, subscription, date(2030, 6, 1)) == Decimal("99999.99")

    def test_uses_injected_elapsed_calculator(self, rate_model, monthly_policy):
        class FixedElapsed:
            def calculate(self, policy, subscription, as_of):
                return 2

        calc = CurrentValueCalculator(rate_model, elapsed_calc=FixedElapsed())
        subscription = build_subscription(principal="100")

        assert calc.calculate(monthly_policy, subscription, date(2024, 1, 2)) == Decimal("100") * Decimal("1.005") ** 2


# =============================================================================
# PROGRESS TESTS
# =============================================================================

class TestProgressCalculator:
    """Tests for term progress and days remaining."""

    def test_progress_at_start_is_zero(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().progress_percentage(subscription, date(2024, 1, 1)) == Decimal("0")

    def test_progress_halfway(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().progress_percentage(subscription, date(2024, 1, 6)) == Decimal("50")

    def test_progress_clamped_above(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().progress_percentage(subscription, date(2025, 1, 1)) == Decimal("100")

    def test_progress_clamped_below(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().progress_percentage(subscription, date(2023, 1, 1)) == Decimal("0")

    def test_zero_length_term_reports_complete(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 1))

        assert ProgressCalculator().progress_percentage(subscription, date(2024, 1, 1)) == Decimal("100")

    def test_days_remaining(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().days_remaining(subscription, date(2024, 1, 6)) == 5
        assert ProgressCalculator().days_remaining(subscription, date(2024, 1, 11)) == 0

    def test_days_remaining_never_negative(self):
        subscription = build_subscription(maturity_date=date(2024, 1, 11))

        assert ProgressCalculator().days_remaining(subscription, date(2024, 3, 1)) == 0


# =============================================================================
# COMPOUND TESTS
# =============================================================================

class TestCompound:
    """Tests for the compounding formula."""

    def test_two_periods(self):
        assert compound(Decimal("100"), Decimal("0.1"), 2) == Decimal("121")

    def test_zero_periods_returns_principal(self):
        assert compound(Decimal("100"), Decimal("0.1"), 0) == Decimal("100")
