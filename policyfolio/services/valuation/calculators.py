# policyfolio/services/valuation/calculators.py
"""
Point-in-time valuation calculators.

Each calculator follows the Single Responsibility Principle:
- SubscriptionValidator: Rejects structurally impossible subscriptions
- ElapsedPeriodsCalculator: Whole compounding periods elapsed at a date
- MaturityCalculator: Full-duration (expected maturity) amount
- CurrentValueCalculator: Value of a subscription at a date
- ProgressCalculator: Term progress and days remaining

Design Principles:
- Stateless (no instance state beyond injected collaborators)
- The as-of date is always a parameter; nothing reads the system clock
- Decimal for ALL financial calculations, never rounded here

Compounding models (period rate r from RateModel, n whole periods):
    LUMPSUM: value = principal × (1 + r_annual)^years
    DAILY:   value = principal × (1 + r_daily)^days
    MONTHLY: value = principal × (1 + r_monthly)^months

Usage:
    value_calc = CurrentValueCalculator(RateModel())
    value = value_calc.calculate(policy, subscription, as_of=date(2024, 6, 30))
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from policyfolio.models import Policy, PolicyType, Subscription
from policyfolio.services.constants import HUNDRED, ONE, ZERO
from policyfolio.services.exceptions import InvalidSubscriptionError
from policyfolio.services.valuation.rates import RateModel
from policyfolio.utils.date_utils import days_between, months_between, years_between

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATION
# =============================================================================

class SubscriptionValidator:
    """Checks the structural invariants every valuation relies on."""

    def validate(self, subscription: Subscription) -> None:
        """
        Raises:
            InvalidSubscriptionError: If principal <= 0 or maturity_date is
                not after start_date
        """
        if subscription.principal is None or subscription.principal <= ZERO:
            raise InvalidSubscriptionError(
                subscription.subscription_id,
                f"principal must be positive, got {subscription.principal}",
                field="principal",
            )
        if subscription.maturity_date <= subscription.start_date:
            raise InvalidSubscriptionError(
                subscription.subscription_id,
                f"maturity date {subscription.maturity_date.isoformat()} is not after "
                f"start date {subscription.start_date.isoformat()}",
                field="maturity_date",
            )


# =============================================================================
# ELAPSED PERIODS
# =============================================================================

class ElapsedPeriodsCalculator:
    """
    Counts whole compounding periods between start and an as-of date.

    The count is taken up to min(as_of, maturity_date), clamped at 0 for
    dates before the start, and capped at the full-duration period count.

    Note:
        The cap matters for DAILY policies: a 5-year term spanning two leap
        days has 1827 calendar days but compounds for 5 × 365 = 1825 days at
        maturity. Without the cap the day before maturity would be worth
        more than the maturity amount.
    """

    def __init__(self, rate_model: RateModel) -> None:
        self._rate_model = rate_model

    def calculate(self, policy: Policy, subscription: Subscription, as_of: date) -> int:
        end = min(as_of, subscription.maturity_date)
        start = subscription.start_date

        if policy.policy_type == PolicyType.DAILY:
            elapsed = days_between(start, end)
        elif policy.policy_type == PolicyType.MONTHLY:
            elapsed = months_between(start, end)
        else:
            elapsed = years_between(start, end)

        return min(max(elapsed, 0), self._rate_model.total_periods(policy))


# =============================================================================
# MATURITY AMOUNT
# =============================================================================

class MaturityCalculator:
    """
    Full-duration compounding, as fixed on a subscription at creation.

    Periods compounded:
        LUMPSUM: duration_years
        DAILY:   duration_years × 365
        MONTHLY: duration_years × 12
    """

    def __init__(self, rate_model: RateModel) -> None:
        self._rate_model = rate_model

    def calculate(self, policy: Policy, principal: Decimal) -> Decimal:
        return compound(
            principal,
            self._rate_model.rate_for(policy),
            self._rate_model.total_periods(policy),
        )


# =============================================================================
# CURRENT VALUE
# =============================================================================

class CurrentValueCalculator:
    """
    Value of a subscription at an arbitrary date.

    On or after the maturity date the subscription's stored
    expected_maturity_amount is returned as-is, so the value is flat from
    maturity onwards.
    """

    def __init__(
            self,
            rate_model: RateModel,
            elapsed_calc: ElapsedPeriodsCalculator | None = None,
    ) -> None:
        self._rate_model = rate_model
        self._elapsed_calc = elapsed_calc or ElapsedPeriodsCalculator(rate_model)

    def calculate(self, policy: Policy, subscription: Subscription, as_of: date) -> Decimal:
        """
        Calculate the value at as_of.

        Args:
            policy: The subscribed policy
            subscription: A validated subscription
            as_of: Evaluation date

        Returns:
            Unrounded current value
        """
        if as_of >= subscription.maturity_date:
            return subscription.expected_maturity_amount

        periods = self._elapsed_calc.calculate(policy, subscription, as_of)
        return compound(subscription.principal, self._rate_model.rate_for(policy), periods)


# =============================================================================
# PROGRESS
# =============================================================================

class ProgressCalculator:
    """Term progress and days remaining."""

    def progress_percentage(self, subscription: Subscription, as_of: date) -> Decimal:
        """
        Share of the term elapsed, clamped to [0, 100].

        Formula: days(start, as_of) / days(start, maturity) × 100

        Returns 100 for a zero-length term instead of dividing by zero.
        """
        total_days = days_between(subscription.start_date, subscription.maturity_date)
        if total_days <= 0:
            return HUNDRED

        elapsed_days = days_between(subscription.start_date, as_of)
        progress = Decimal(elapsed_days) / Decimal(total_days) * HUNDRED
        return min(HUNDRED, max(ZERO, progress))

    def days_remaining(self, subscription: Subscription, as_of: date) -> int:
        """Calendar days until maturity, 0 once the maturity date is reached."""
        return max(0, days_between(as_of, subscription.maturity_date))


# =============================================================================
# HELPERS
# =============================================================================

def compound(principal: Decimal, period_rate: Decimal, periods: int) -> Decimal:
    """
    Compound a principal over whole periods.

    Formula: principal × (1 + period_rate)^periods
    """
    return principal * (ONE + period_rate) ** periods
