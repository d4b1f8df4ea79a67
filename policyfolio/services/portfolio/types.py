# policyfolio/services/portfolio/types.py
"""
Data types for the Portfolio Aggregator.

All amounts are unrounded Decimals; see policyfolio/schemas/portfolio.py for
the presentation versions.

Type Hierarchy:
    PolicyHolding      - One valued subscription with its policy fields
    BreakdownGroup     - Running totals for one group (type or duration)
    PortfolioSummary   - Portfolio-wide totals
    ValuationFailure   - A subscription that could not be valued
    PortfolioValuation - Summary + breakdowns + holdings + failures
    PerformancePoint   - One month of the trailing performance history
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from policyfolio.models import PolicyType, SubscriptionStatus
from policyfolio.services.constants import HUNDRED, ZERO


# =============================================================================
# HOLDINGS
# =============================================================================

@dataclass(frozen=True)
class PolicyHolding:
    """
    A subscription valued at a date, flattened with its policy's fields.

    Attributes:
        subscription_id: Subscription identifier
        policy_id: Policy identifier
        policy_number: Human-facing policy number
        policy_name: Policy display name
        policy_type: Compounding cadence
        duration_years: Policy term
        interest_rate: Annual rate in percent
        status: Subscription status
        investment_amount: Principal
        current_value: Value at the valuation date
        gain: current_value - investment_amount
        start_date: Subscription start
        maturity_date: Subscription maturity
        days_remaining: Days until maturity (0 once matured)
        progress_percentage: Share of term elapsed, in [0, 100]
        is_matured: Valuation date is on or after maturity
        expected_maturity_amount: Value fixed at creation for the maturity date
    """

    subscription_id: str
    policy_id: str | None
    policy_number: str | None
    policy_name: str | None
    policy_type: PolicyType
    duration_years: int
    interest_rate: Decimal
    status: SubscriptionStatus
    investment_amount: Decimal
    current_value: Decimal
    gain: Decimal
    start_date: date
    maturity_date: date
    days_remaining: int
    progress_percentage: Decimal
    is_matured: bool
    expected_maturity_amount: Decimal

    @property
    def interest_earned(self) -> Decimal:
        """Interest earned so far (identical to gain)."""
        return self.gain


# =============================================================================
# BREAKDOWN
# =============================================================================

@dataclass
class BreakdownGroup:
    """
    Totals for one breakdown group, filled in a single pass.

    Attributes:
        count: Number of holdings in the group
        investment: Summed principal
        current_value: Summed current value
        gain: Summed gain
    """

    count: int = 0
    investment: Decimal = ZERO
    current_value: Decimal = ZERO
    gain: Decimal = ZERO

    def add(self, holding: PolicyHolding) -> None:
        """Fold one holding into the group totals."""
        self.count += 1
        self.investment += holding.investment_amount
        self.current_value += holding.current_value
        self.gain += holding.gain


# =============================================================================
# SUMMARY
# =============================================================================

@dataclass(frozen=True)
class PortfolioSummary:
    """
    Portfolio-wide totals over active subscriptions.

    Attributes:
        total_investment: Sum of principals
        total_current_value: Sum of current values
        total_gain: Sum of per-subscription gains
        total_policies: Number of subscriptions valued
    """

    total_investment: Decimal
    total_current_value: Decimal
    total_gain: Decimal
    total_policies: int

    @property
    def total_interest_earned(self) -> Decimal:
        """Interest earned across the portfolio (identical to total_gain)."""
        return self.total_gain

    @property
    def overall_return_percentage(self) -> Decimal:
        """total_gain / total_investment × 100, or 0 for an empty portfolio."""
        if self.total_investment == ZERO:
            return ZERO
        return self.total_gain / self.total_investment * HUNDRED


@dataclass(frozen=True)
class ValuationFailure:
    """
    A subscription skipped because it could not be valued.

    Attributes:
        subscription_id: The skipped subscription
        reason: Error message
        field: Offending field, when known
    """

    subscription_id: str
    reason: str
    field: str | None = None


@dataclass
class PortfolioValuation:
    """
    Complete portfolio view at a date.

    Attributes:
        valuation_date: The as-of date used
        summary: Portfolio-wide totals
        by_type: Groups keyed by policy type, in first-encounter order
        by_duration: Groups keyed by duration in years, in first-encounter order
        policies: Holdings ordered by ascending maturity date
        failures: Subscriptions that could not be valued
    """

    valuation_date: date
    summary: PortfolioSummary
    by_type: dict[PolicyType, BreakdownGroup]
    by_duration: dict[int, BreakdownGroup]
    policies: list[PolicyHolding]
    failures: list[ValuationFailure] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """True if at least one subscription was skipped."""
        return bool(self.failures)


# =============================================================================
# HISTORY
# =============================================================================

@dataclass(frozen=True)
class PerformancePoint:
    """
    Portfolio totals at one step of the trailing monthly history.

    Only subscriptions already started on ``date`` are counted.

    Attributes:
        date: Point date
        investment: Summed principal of started subscriptions
        value: Summed value of started subscriptions at date
    """

    date: date
    investment: Decimal
    value: Decimal

    @property
    def gain(self) -> Decimal:
        return self.value - self.investment
