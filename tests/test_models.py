# tests/test_models.py
"""
Tests for the Policy and Subscription value objects.
"""

from datetime import date
from decimal import Decimal

import pytest

from policyfolio.models import Policy, PolicyType, Subscription, SubscriptionStatus
from policyfolio.services.exceptions import InvalidPolicyError


class TestPolicyType:
    """Tests for policy type parsing."""

    @pytest.mark.parametrize("raw, expected", [
        ("daily", PolicyType.DAILY),
        ("MONTHLY", PolicyType.MONTHLY),
        (" lumpsum ", PolicyType.LUMPSUM),
        ("digital_gold", PolicyType.LUMPSUM),
    ])
    def test_parse(self, raw, expected):
        assert PolicyType(raw) is expected

    def test_unknown(self):
        with pytest.raises(ValueError):
            PolicyType("weekly")


class TestPolicy:
    """Tests for Policy construction and validity."""

    def test_coerces_values(self):
        policy = Policy(
            policy_type="digital_gold",
            duration_years=3,
            annual_rate_percent=7.5,
            min_investment=100,
        )

        assert policy.policy_type is PolicyType.LUMPSUM
        assert policy.annual_rate_percent == Decimal("7.5")
        assert policy.min_investment == Decimal("100")
        assert policy.max_investment is None

    @pytest.mark.parametrize("duration", [0, -1])
    def test_non_positive_duration(self, duration):
        with pytest.raises(InvalidPolicyError) as exc_info:
            Policy(policy_type=PolicyType.DAILY, duration_years=duration, annual_rate_percent=Decimal("5"))

        assert exc_info.value.field == "duration_years"

    def test_negative_rate(self):
        with pytest.raises(InvalidPolicyError) as exc_info:
            Policy(policy_type=PolicyType.DAILY, duration_years=1, annual_rate_percent=Decimal("-0.1"))

        assert exc_info.value.field == "annual_rate_percent"

    def test_max_below_min(self):
        with pytest.raises(InvalidPolicyError):
            Policy(
                policy_type=PolicyType.MONTHLY,
                duration_years=1,
                annual_rate_percent=Decimal("5"),
                min_investment=Decimal("500"),
                max_investment=Decimal("100"),
            )

    def test_is_valid_window(self):
        policy = Policy(
            policy_type=PolicyType.MONTHLY,
            duration_years=1,
            annual_rate_percent=Decimal("5"),
            valid_from=date(2024, 1, 1),
            valid_to=date(2024, 12, 31),
        )

        assert policy.is_valid(date(2024, 1, 1))
        assert policy.is_valid(date(2024, 12, 31))
        assert not policy.is_valid(date(2023, 12, 31))
        assert not policy.is_valid(date(2025, 1, 1))

    def test_inactive_never_valid(self):
        policy = Policy(
            policy_type=PolicyType.MONTHLY,
            duration_years=1,
            annual_rate_percent=Decimal("5"),
            is_active=False,
        )

        assert not policy.is_valid(date(2024, 6, 1))


class TestSubscription:
    """Tests for Subscription construction."""

    def test_coerces_values(self):
        subscription = Subscription(
            subscription_id="SUB-1",
            customer_id="CUST-1",
            policy_id="POL-1",
            principal=0.1,
            start_date=date(2024, 1, 1),
            maturity_date=date(2025, 1, 1),
            expected_maturity_amount="0.105",
            status="cancelled",
        )

        assert subscription.principal == Decimal("0.1")
        assert subscription.expected_maturity_amount == Decimal("0.105")
        assert subscription.status is SubscriptionStatus.CANCELLED
        assert subscription.is_active is False

    def test_inconsistent_record_constructs(self):
        """Invalid records are reported at valuation time, not here."""
        subscription = Subscription(
            subscription_id="SUB-2",
            customer_id=None,
            policy_id=None,
            principal=Decimal("0"),
            start_date=date(2024, 1, 1),
            maturity_date=date(2023, 1, 1),
            expected_maturity_amount=Decimal("0"),
        )

        assert subscription.is_active is True

    def test_terminal_statuses(self):
        assert SubscriptionStatus.MATURED.is_terminal
        assert SubscriptionStatus.CANCELLED.is_terminal
        assert not SubscriptionStatus.ACTIVE.is_terminal
