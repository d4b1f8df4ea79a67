# tests/conftest.py
"""
Pytest configuration and fixtures.

This module provides shared fixtures for all tests:
- Sample policies (one per compounding type)
- A subscription factory that fills in maturity date and amount
- Engine services
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from policyfolio.models import Policy, PolicyType, Subscription, SubscriptionStatus
from policyfolio.services.valuation import ProjectionEngine, ValuationService
from policyfolio.utils.date_utils import add_years


SubscriptionFactory = Callable[..., Subscription]


# =============================================================================
# POLICY FIXTURES
# =============================================================================

@pytest.fixture
def lumpsum_policy() -> Policy:
    """3-year digital gold policy at 8%."""
    return Policy(
        policy_type=PolicyType.LUMPSUM,
        duration_years=3,
        annual_rate_percent=Decimal("8"),
        min_investment=Decimal("1000"),
        max_investment=Decimal("1000000"),
        policy_id="POL-GLD-3",
        policy_number="GLD003",
        name="Digital Gold 3Y",
    )


@pytest.fixture
def daily_policy() -> Policy:
    """2-year daily savings policy at 7.3% (0.0002 per day)."""
    return Policy(
        policy_type=PolicyType.DAILY,
        duration_years=2,
        annual_rate_percent=Decimal("7.3"),
        min_investment=Decimal("100"),
        policy_id="POL-DLY-2",
        policy_number="DLY002",
        name="Daily Saver 2Y",
    )


@pytest.fixture
def monthly_policy() -> Policy:
    """2-year monthly plan at 6% (0.005 per month)."""
    return Policy(
        policy_type=PolicyType.MONTHLY,
        duration_years=2,
        annual_rate_percent=Decimal("6"),
        min_investment=Decimal("500"),
        policy_id="POL-MTH-2",
        policy_number="MTH002",
        name="Monthly Plan 2Y",
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def valuation_service() -> ValuationService:
    return ValuationService()


@pytest.fixture
def projection_engine(valuation_service: ValuationService) -> ProjectionEngine:
    return ProjectionEngine(valuation_service, horizon_months=12)


# =============================================================================
# SUBSCRIPTION FACTORY
# =============================================================================

@pytest.fixture
def make_subscription(valuation_service: ValuationService) -> SubscriptionFactory:
    """
    Factory for consistent subscriptions.

    maturity_date and expected_maturity_amount are derived from the policy
    unless given explicitly.
    """
    counter = {"n": 0}

    def _make(
            policy: Policy,
            principal: Decimal | str = "10000",
            start_date: date = date(2024, 1, 15),
            status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
            subscription_id: str | None = None,
            maturity_date: date | None = None,
            expected_maturity_amount: Decimal | None = None,
    ) -> Subscription:
        counter["n"] += 1
        principal = Decimal(str(principal))
        if expected_maturity_amount is None and principal > 0:
            expected_maturity_amount = valuation_service.expected_maturity_amount(
                policy, principal
            )
        return Subscription(
            subscription_id=subscription_id or f"SUB-TEST-{counter['n']:03d}",
            customer_id="CUST-1",
            policy_id=policy.policy_id,
            principal=principal,
            start_date=start_date,
            maturity_date=maturity_date or add_years(start_date, policy.duration_years),
            expected_maturity_amount=expected_maturity_amount or Decimal("0"),
            status=status,
        )

    return _make
