# policyfolio/services/portfolio/__init__.py
"""
Portfolio Aggregation Package.

Rolls a customer's (Subscription, Policy) pairs up into:
- A summary (totals, overall return)
- Breakdowns by policy type and by duration
- Per-policy holdings, trailing performance and upcoming maturities

Usage:
    from policyfolio.services.portfolio import PortfolioAggregator

    portfolio = PortfolioAggregator().aggregate(holdings, as_of=date(2024, 6, 30))
"""

from policyfolio.services.portfolio.aggregator import PortfolioAggregator
from policyfolio.services.portfolio.types import (
    PolicyHolding,
    BreakdownGroup,
    PortfolioSummary,
    ValuationFailure,
    PortfolioValuation,
    PerformancePoint,
)

__all__ = [
    "PortfolioAggregator",
    "PolicyHolding",
    "BreakdownGroup",
    "PortfolioSummary",
    "ValuationFailure",
    "PortfolioValuation",
    "PerformancePoint",
]
