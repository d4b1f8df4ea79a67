# policyfolio/schemas/portfolio.py
"""
Pydantic schemas for portfolio views.

These schemas handle:
- Per-policy holdings
- Portfolio summary
- Breakdown by policy type and by duration
- Trailing performance history
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from policyfolio.models import PolicyType, SubscriptionStatus
from policyfolio.schemas.common import quantize_money, quantize_percentage
from policyfolio.services.portfolio.types import (
    BreakdownGroup,
    PerformancePoint,
    PolicyHolding,
    PortfolioSummary,
    PortfolioValuation,
)


# =============================================================================
# HOLDING SCHEMAS
# =============================================================================

class PolicyHoldingResponse(BaseModel):
    """One valued subscription in a portfolio."""

    model_config = ConfigDict(from_attributes=True)

    subscription_id: str
    policy_id: str | None = None
    policy_number: str | None = None
    policy_name: str | None = None
    policy_type: PolicyType
    duration_years: int
    interest_rate: Decimal = Field(..., description="Annual rate in percent")
    status: SubscriptionStatus
    investment_amount: Decimal
    current_value: Decimal
    interest_earned: Decimal
    start_date: dt.date
    maturity_date: dt.date
    days_remaining: int = Field(..., ge=0)
    progress_percentage: Decimal = Field(..., ge=0, le=100)
    is_matured: bool
    expected_maturity_amount: Decimal

    @classmethod
    def from_result(cls, holding: PolicyHolding) -> "PolicyHoldingResponse":
        return cls(
            subscription_id=holding.subscription_id,
            policy_id=holding.policy_id,
            policy_number=holding.policy_number,
            policy_name=holding.policy_name,
            policy_type=holding.policy_type,
            duration_years=holding.duration_years,
            interest_rate=holding.interest_rate,
            status=holding.status,
            investment_amount=quantize_money(holding.investment_amount),
            current_value=quantize_money(holding.current_value),
            interest_earned=quantize_money(holding.interest_earned),
            start_date=holding.start_date,
            maturity_date=holding.maturity_date,
            days_remaining=holding.days_remaining,
            progress_percentage=quantize_percentage(holding.progress_percentage),
            is_matured=holding.is_matured,
            expected_maturity_amount=quantize_money(holding.expected_maturity_amount),
        )


class ValuationFailureResponse(BaseModel):
    """A subscription left out of the portfolio."""

    model_config = ConfigDict(from_attributes=True)

    subscription_id: str
    reason: str
    field: str | None = None


# =============================================================================
# SUMMARY & BREAKDOWN SCHEMAS
# =============================================================================

class PortfolioSummaryResponse(BaseModel):
    """Portfolio-wide totals."""

    model_config = ConfigDict(from_attributes=True)

    total_investment: Decimal
    total_current_value: Decimal
    total_interest_earned: Decimal
    total_policies: int = Field(..., ge=0)
    overall_return_percentage: Decimal

    @classmethod
    def from_result(cls, summary: PortfolioSummary) -> "PortfolioSummaryResponse":
        return cls(
            total_investment=quantize_money(summary.total_investment),
            total_current_value=quantize_money(summary.total_current_value),
            total_interest_earned=quantize_money(summary.total_interest_earned),
            total_policies=summary.total_policies,
            overall_return_percentage=quantize_percentage(summary.overall_return_percentage),
        )


class BreakdownGroupResponse(BaseModel):
    """Totals for one breakdown group."""

    model_config = ConfigDict(from_attributes=True)

    count: int = Field(..., ge=0)
    investment: Decimal
    current_value: Decimal
    gain: Decimal

    @classmethod
    def from_result(cls, group: BreakdownGroup) -> "BreakdownGroupResponse":
        return cls(
            count=group.count,
            investment=quantize_money(group.investment),
            current_value=quantize_money(group.current_value),
            gain=quantize_money(group.gain),
        )


class PortfolioBreakdownResponse(BaseModel):
    """
    Portfolio split by policy type and by duration.

    Keys are the policy type value ("daily", "monthly", "lumpsum") and the
    duration in years. Both keep the portfolio's first-encounter order.
    """

    by_type: dict[str, BreakdownGroupResponse]
    by_duration: dict[int, BreakdownGroupResponse]


class PortfolioResponse(BaseModel):
    """Complete portfolio view."""

    valuation_date: dt.date
    summary: PortfolioSummaryResponse
    breakdown: PortfolioBreakdownResponse
    policies: list[PolicyHoldingResponse]
    failures: list[ValuationFailureResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, portfolio: PortfolioValuation) -> "PortfolioResponse":
        breakdown = PortfolioBreakdownResponse(
            by_type={
                policy_type.value: BreakdownGroupResponse.from_result(group)
                for policy_type, group in portfolio.by_type.items()
            },
            by_duration={
                years: BreakdownGroupResponse.from_result(group)
                for years, group in portfolio.by_duration.items()
            },
        )
        return cls(
            valuation_date=portfolio.valuation_date,
            summary=PortfolioSummaryResponse.from_result(portfolio.summary),
            breakdown=breakdown,
            policies=[PolicyHoldingResponse.from_result(h) for h in portfolio.policies],
            failures=[ValuationFailureResponse.model_validate(f) for f in portfolio.failures],
        )


# =============================================================================
# HISTORY SCHEMAS
# =============================================================================

class PerformancePointResponse(BaseModel):
    """One point of the trailing performance chart."""

    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    investment: Decimal
    value: Decimal
    gain: Decimal

    @classmethod
    def from_result(cls, point: PerformancePoint) -> "PerformancePointResponse":
        return cls(
            date=point.date,
            investment=quantize_money(point.investment),
            value=quantize_money(point.value),
            gain=quantize_money(point.gain),
        )
