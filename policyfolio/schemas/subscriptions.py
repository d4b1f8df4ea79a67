# policyfolio/schemas/subscriptions.py
"""
Pydantic schemas for subscriptions and the policy catalog.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from policyfolio.models import PolicyType, Subscription, SubscriptionStatus
from policyfolio.schemas.common import quantize_money
from policyfolio.services.subscriptions import PolicyCatalog, SubscriptionStats


# =============================================================================
# SUBSCRIPTION SCHEMAS
# =============================================================================

class SubscriptionResponse(BaseModel):
    """A stored subscription."""

    model_config = ConfigDict(from_attributes=True)

    subscription_id: str
    customer_id: str | None = None
    policy_id: str | None = None
    principal: Decimal
    start_date: dt.date
    maturity_date: dt.date
    expected_maturity_amount: Decimal
    status: SubscriptionStatus

    @classmethod
    def from_result(cls, subscription: Subscription) -> "SubscriptionResponse":
        return cls(
            subscription_id=subscription.subscription_id,
            customer_id=subscription.customer_id,
            policy_id=subscription.policy_id,
            principal=quantize_money(subscription.principal),
            start_date=subscription.start_date,
            maturity_date=subscription.maturity_date,
            expected_maturity_amount=quantize_money(subscription.expected_maturity_amount),
            status=subscription.status,
        )


class SubscriptionStatsResponse(BaseModel):
    """Headline subscription numbers for a customer."""

    model_config = ConfigDict(from_attributes=True)

    total_subscriptions: int = Field(..., ge=0)
    active_subscriptions: int = Field(..., ge=0)
    total_investment: Decimal
    expected_returns: Decimal = Field(..., description="Expected maturity total minus investment")
    estimated_total: Decimal

    @classmethod
    def from_result(cls, stats: SubscriptionStats) -> "SubscriptionStatsResponse":
        return cls(
            total_subscriptions=stats.total_subscriptions,
            active_subscriptions=stats.active_subscriptions,
            total_investment=quantize_money(stats.total_investment),
            expected_returns=quantize_money(stats.expected_returns),
            estimated_total=quantize_money(stats.estimated_total),
        )


# =============================================================================
# CATALOG SCHEMAS
# =============================================================================

class PolicyResponse(BaseModel):
    """A policy offered for subscription."""

    model_config = ConfigDict(from_attributes=True)

    policy_id: str | None = None
    policy_number: str | None = None
    name: str | None = None
    policy_type: PolicyType
    duration_years: int = Field(..., gt=0)
    annual_rate_percent: Decimal = Field(..., ge=0)
    min_investment: Decimal | None = None
    max_investment: Decimal | None = None
    valid_from: dt.date | None = None
    valid_to: dt.date | None = None


class PolicyCatalogResponse(BaseModel):
    """Policies open for subscription, highest rate first."""

    policies: list[PolicyResponse]
    total_available: int = Field(..., ge=0)
    by_type: dict[str, int]

    @classmethod
    def from_result(cls, catalog: PolicyCatalog) -> "PolicyCatalogResponse":
        return cls(
            policies=[PolicyResponse.model_validate(p) for p in catalog.policies],
            total_available=catalog.total_available,
            by_type={policy_type.value: count for policy_type, count in catalog.by_type.items()},
        )
