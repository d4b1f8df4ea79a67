# tests/services/valuation/test_rates.py
"""
Unit tests for RateModel.

Test Coverage:
- periods_per_year: 365 / 12 / 1 per policy type
- period_rate: exact Decimal conversion, no rounding
- rate_for / total_periods: policy-level helpers
"""

from decimal import Decimal

import pytest

from policyfolio.models import PolicyType
from policyfolio.services.valuation.rates import RateModel


class TestPeriodsPerYear:
    """Tests for compounding periods per policy type."""

    @pytest.mark.parametrize("policy_type, expected", [
        (PolicyType.DAILY, 365),
        (PolicyType.MONTHLY, 12),
        (PolicyType.LUMPSUM, 1),
    ])
    def test_periods_per_year(self, policy_type, expected):
        assert RateModel.periods_per_year(policy_type) == expected

    def test_accepts_raw_type_value(self):
        """Stored type strings are accepted as well as enum members."""
        assert RateModel.periods_per_year("monthly") == 12


class TestPeriodRate:
    """Tests for annual → period rate conversion."""

    def test_daily_rate_is_exact(self):
        """7.3% / 365 = 0.0002 exactly."""
        assert RateModel.period_rate(Decimal("7.3"), 365) == Decimal("0.0002")

    def test_monthly_rate_is_exact(self):
        assert RateModel.period_rate(Decimal("6"), 12) == Decimal("0.005")

    def test_lumpsum_rate_is_annual_fraction(self):
        assert RateModel.period_rate(Decimal("8"), 1) == Decimal("0.08")

    def test_zero_rate(self):
        assert RateModel.period_rate(Decimal("0"), 365) == Decimal("0")

    def test_non_terminating_rate_is_not_rounded(self):
        """8% / 12 keeps full context precision (no 2dp rounding)."""
        rate = RateModel.period_rate(Decimal("8"), 12)
        assert rate != Decimal("0.01")
        assert abs(rate * 12 - Decimal("0.08")) < Decimal("1e-25")


class TestPolicyHelpers:
    """Tests for rate_for and total_periods."""

    def test_rate_for_uses_policy_cadence(self, daily_policy, monthly_policy, lumpsum_policy):
        model = RateModel()
        assert model.rate_for(daily_policy) == Decimal("0.0002")
        assert model.rate_for(monthly_policy) == Decimal("0.005")
        assert model.rate_for(lumpsum_policy) == Decimal("0.08")

    def test_total_periods(self, daily_policy, monthly_policy, lumpsum_policy):
        model = RateModel()
        assert model.total_periods(daily_policy) == 2 * 365
        assert model.total_periods(monthly_policy) == 2 * 12
        assert model.total_periods(lumpsum_policy) == 3
