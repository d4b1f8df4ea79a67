# policyfolio/services/__init__.py
"""
Service layer for policy valuation.

Services:
- Have NO knowledge of HTTP or storage
- Take the as-of date as an explicit argument (no ambient clock)
- Raise domain-specific exceptions
- Are easily testable via dependency injection

Usage:
    from policyfolio.services import ValuationService
    from policyfolio.services import ProjectionEngine
    from policyfolio.services import PortfolioAggregator
    from policyfolio.services import SubscriptionService
    from policyfolio.services import (
        InvalidSubscriptionError,
        InvestmentLimitError,
        SubscriptionStateError,
    )

Architecture:
    services/
    ├── __init__.py                  # This file - main exports
    ├── exceptions.py                # Domain exceptions
    ├── constants.py                 # Compounding calendar, Decimal constants
    ├── subscriptions.py             # Lifecycle, quotes, stats, catalog
    ├── valuation/                   # Single-subscription engine
    │   ├── rates.py                 # RateModel
    │   ├── calculators.py           # Point-in-time calculators
    │   ├── service.py               # ValuationService
    │   ├── projections.py           # ProjectionEngine
    │   └── types.py                 # Result types
    └── portfolio/                   # Multi-subscription aggregation
        ├── aggregator.py            # PortfolioAggregator
        └── types.py                 # Result types
"""

from policyfolio.services.exceptions import (
    ServiceError,
    ValidationError,
    InvalidPolicyError,
    InvalidSubscriptionError,
    InvestmentLimitError,
    PolicyUnavailableError,
    SubscriptionStateError,
    ValuationError,
    UndefinedReturnError,
)
from policyfolio.services.portfolio import PortfolioAggregator
from policyfolio.services.subscriptions import SubscriptionService
from policyfolio.services.valuation import (
    ProjectionEngine,
    RateModel,
    ValuationService,
)

__all__ = [
    # Services
    "ValuationService",
    "ProjectionEngine",
    "RateModel",
    "PortfolioAggregator",
    "SubscriptionService",

    # Exceptions
    "ServiceError",
    "ValidationError",
    "InvalidPolicyError",
    "InvalidSubscriptionError",
    "InvestmentLimitError",
    "PolicyUnavailableError",
    "SubscriptionStateError",
    "ValuationError",
    "UndefinedReturnError",
]
