# policyfolio/services/valuation/types.py
"""
Internal data types for the Valuation Service.

These dataclasses are produced by the valuation calculators. They are NOT
Pydantic schemas - those live in policyfolio/schemas/ and are where rounding
to presentation precision happens.

Design Principles:
- Immutable value objects (frozen=True)
- Decimal for ALL financial values, kept at full precision
- date (not datetime) for valuation dates

Type Hierarchy:
    SubscriptionValuation - Value, gain and progress of one subscription
    ProjectionPoint       - One future point of a value projection
    PerformanceMetrics    - Return metrics of one subscription
    MaturityQuote         - What an amount would grow to over a policy term
    PolicyDetail          - Valuation + projections + metrics for one subscription
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from policyfolio.models import Policy, Subscription
from policyfolio.services.constants import HUNDRED, ZERO


# =============================================================================
# SUBSCRIPTION VALUATION
# =============================================================================

@dataclass(frozen=True)
class SubscriptionValuation:
    """
    Point-in-time valuation of a single subscription.

    Attributes:
        subscription_id: ID of the valued subscription
        valuation_date: The as-of date used
        principal: Amount invested
        current_value: Value at valuation_date
        gain: current_value - principal (exact)
        progress_percentage: Share of the term elapsed, in [0, 100]
        is_matured: valuation_date >= maturity_date
        days_remaining: Calendar days until maturity (0 once matured)
        elapsed_periods: Compounding periods applied (days, months or years)
        maturity_value: The subscription's expected maturity amount

    Note:
        Once matured, current_value IS maturity_value, not a recomputation.
    """

    subscription_id: str
    valuation_date: date
    principal: Decimal
    current_value: Decimal
    gain: Decimal
    progress_percentage: Decimal
    is_matured: bool
    days_remaining: int
    elapsed_periods: int
    maturity_value: Decimal

    @property
    def gain_percentage(self) -> Decimal:
        """Gain as a percentage of principal (the "current yield")."""
        if self.principal == ZERO:
            return ZERO
        return self.gain / self.principal * HUNDRED


# =============================================================================
# PROJECTIONS & METRICS
# =============================================================================

@dataclass(frozen=True)
class ProjectionPoint:
    """
    One point of a forward value projection.

    Attributes:
        date: Future evaluation date
        projected_value: Value the subscription will have on that date
        projected_gain: projected_value - principal
    """

    date: date
    projected_value: Decimal
    projected_gain: Decimal


@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Return metrics for one subscription.

    Attributes:
        annualized_return: (1 + total_return)^(1/years) - 1 as a fraction,
            0 when less than one whole year has elapsed
        current_yield: Gain as a percentage of principal
        days_to_maturity: Calendar days until maturity (0 once matured)
        progress_percentage: Share of the term elapsed, in [0, 100]
    """

    annualized_return: Decimal
    current_yield: Decimal
    days_to_maturity: int
    progress_percentage: Decimal


@dataclass(frozen=True)
class MaturityQuote:
    """
    What an investment amount grows to over a policy's full term.

    Attributes:
        policy: The quoted policy
        investment_amount: Amount quoted
        maturity_amount: Full-duration compounded value
    """

    policy: Policy
    investment_amount: Decimal
    maturity_amount: Decimal

    @property
    def total_interest(self) -> Decimal:
        return self.maturity_amount - self.investment_amount


@dataclass(frozen=True)
class PolicyDetail:
    """
    Everything known about one subscription at a date.

    Attributes:
        policy: The subscribed policy
        subscription: The subscription itself
        valuation: Point-in-time valuation
        projections: Forward projection points (materialized)
        metrics: Return metrics
    """

    policy: Policy
    subscription: Subscription
    valuation: SubscriptionValuation
    projections: tuple[ProjectionPoint, ...]
    metrics: PerformanceMetrics
