# policyfolio/schemas/valuation.py
"""
Pydantic schemas for single-subscription valuation.

These schemas handle:
- Point-in-time valuation
- Forward projections
- Performance metrics
- Maturity quotes
- Policy detail (all of the above for one subscription)

Each schema has a ``from_result()`` constructor that rounds the engine's
full-precision Decimals for presentation.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from policyfolio.models import PolicyType
from policyfolio.schemas.common import quantize_money, quantize_percentage, quantize_rate
from policyfolio.services.valuation.types import (
    MaturityQuote,
    PerformanceMetrics,
    PolicyDetail,
    ProjectionPoint,
    SubscriptionValuation,
)


# =============================================================================
# VALUATION SCHEMAS
# =============================================================================

class SubscriptionValuationResponse(BaseModel):
    """Valuation of one subscription at a date."""

    model_config = ConfigDict(from_attributes=True)

    subscription_id: str
    valuation_date: dt.date
    investment_amount: Decimal = Field(..., description="Principal invested")
    current_value: Decimal = Field(..., description="Value at valuation_date")
    total_gain: Decimal = Field(..., description="current_value - investment_amount")
    interest_earned: Decimal = Field(..., description="Same as total_gain")
    progress_percentage: Decimal = Field(..., ge=0, le=100)
    is_matured: bool
    days_remaining: int = Field(..., ge=0)
    maturity_value: Decimal = Field(..., description="Expected maturity amount")

    @classmethod
    def from_result(cls, result: SubscriptionValuation) -> "SubscriptionValuationResponse":
        gain = quantize_money(result.gain)
        return cls(
            subscription_id=result.subscription_id,
            valuation_date=result.valuation_date,
            investment_amount=quantize_money(result.principal),
            current_value=quantize_money(result.current_value),
            total_gain=gain,
            interest_earned=gain,
            progress_percentage=quantize_percentage(result.progress_percentage),
            is_matured=result.is_matured,
            days_remaining=result.days_remaining,
            maturity_value=quantize_money(result.maturity_value),
        )


# =============================================================================
# PROJECTION SCHEMAS
# =============================================================================

class ProjectionPointResponse(BaseModel):
    """One point of a value projection."""

    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    projected_value: Decimal
    projected_gain: Decimal

    @classmethod
    def from_result(cls, point: ProjectionPoint) -> "ProjectionPointResponse":
        return cls(
            date=point.date,
            projected_value=quantize_money(point.projected_value),
            projected_gain=quantize_money(point.projected_gain),
        )


class PerformanceMetricsResponse(BaseModel):
    """Return metrics for one subscription."""

    model_config = ConfigDict(from_attributes=True)

    annualized_return: Decimal = Field(
        ...,
        description="Annualized return as a fraction (0.08 = 8%), 0 in the first year"
    )
    current_yield: Decimal = Field(..., description="Gain as percentage of principal")
    days_to_maturity: int = Field(..., ge=0)
    progress_percentage: Decimal = Field(..., ge=0, le=100)

    @classmethod
    def from_result(cls, metrics: PerformanceMetrics) -> "PerformanceMetricsResponse":
        return cls(
            annualized_return=quantize_rate(metrics.annualized_return),
            current_yield=quantize_percentage(metrics.current_yield),
            days_to_maturity=metrics.days_to_maturity,
            progress_percentage=quantize_percentage(metrics.progress_percentage),
        )


# =============================================================================
# QUOTE & DETAIL SCHEMAS
# =============================================================================

class MaturityQuoteResponse(BaseModel):
    """Maturity amount quoted for an investment."""

    model_config = ConfigDict(from_attributes=True)

    policy_name: str | None = None
    policy_type: PolicyType
    duration_years: int
    interest_rate: Decimal
    investment_amount: Decimal
    maturity_amount: Decimal
    total_interest: Decimal

    @classmethod
    def from_result(cls, quote: MaturityQuote) -> "MaturityQuoteResponse":
        return cls(
            policy_name=quote.policy.name,
            policy_type=quote.policy.policy_type,
            duration_years=quote.policy.duration_years,
            interest_rate=quote.policy.annual_rate_percent,
            investment_amount=quantize_money(quote.investment_amount),
            maturity_amount=quantize_money(quote.maturity_amount),
            total_interest=quantize_money(quote.total_interest),
        )


class PolicyDetailResponse(BaseModel):
    """Valuation, projections and metrics for one subscription."""

    model_config = ConfigDict(from_attributes=True)

    policy_number: str | None = None
    policy_name: str | None = None
    policy_type: PolicyType
    interest_rate: Decimal
    duration_years: int
    start_date: dt.date
    maturity_date: dt.date
    valuation: SubscriptionValuationResponse
    projections: list[ProjectionPointResponse]
    performance_metrics: PerformanceMetricsResponse

    @classmethod
    def from_result(cls, detail: PolicyDetail) -> "PolicyDetailResponse":
        return cls(
            policy_number=detail.policy.policy_number,
            policy_name=detail.policy.name,
            policy_type=detail.policy.policy_type,
            interest_rate=detail.policy.annual_rate_percent,
            duration_years=detail.policy.duration_years,
            start_date=detail.subscription.start_date,
            maturity_date=detail.subscription.maturity_date,
            valuation=SubscriptionValuationResponse.from_result(detail.valuation),
            projections=[ProjectionPointResponse.from_result(p) for p in detail.projections],
            performance_metrics=PerformanceMetricsResponse.from_result(detail.metrics),
        )
