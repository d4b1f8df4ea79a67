# policyfolio/schemas/__init__.py
"""
Presentation schemas.

Service results carry full-precision Decimals; these Pydantic models round
them (half-up) for display and serialization.

Usage:
    from policyfolio.schemas import PortfolioResponse

    response = PortfolioResponse.from_result(aggregator.aggregate(holdings, as_of))
    response.model_dump(mode="json")
"""

from policyfolio.schemas.portfolio import (
    BreakdownGroupResponse,
    PerformancePointResponse,
    PolicyHoldingResponse,
    PortfolioBreakdownResponse,
    PortfolioResponse,
    PortfolioSummaryResponse,
    ValuationFailureResponse,
)
from policyfolio.schemas.subscriptions import (
    PolicyCatalogResponse,
    PolicyResponse,
    SubscriptionResponse,
    SubscriptionStatsResponse,
)
from policyfolio.schemas.valuation import (
    MaturityQuoteResponse,
    PerformanceMetricsResponse,
    PolicyDetailResponse,
    ProjectionPointResponse,
    SubscriptionValuationResponse,
)

__all__ = [
    # Valuation
    "SubscriptionValuationResponse",
    "ProjectionPointResponse",
    "PerformanceMetricsResponse",
    "MaturityQuoteResponse",
    "PolicyDetailResponse",

    # Portfolio
    "PolicyHoldingResponse",
    "ValuationFailureResponse",
    "PortfolioSummaryResponse",
    "BreakdownGroupResponse",
    "PortfolioBreakdownResponse",
    "PortfolioResponse",
    "PerformancePointResponse",

    # Subscriptions
    "SubscriptionResponse",
    "SubscriptionStatsResponse",
    "PolicyResponse",
    "PolicyCatalogResponse",
]
