# policyfolio/services/valuation/__init__.py
"""
Valuation Service Package.

This package values individual subscriptions:
- Point-in-time valuation (ValuationService.value)
- Forward projections (ProjectionEngine.project)
- Return metrics (ProjectionEngine.annualized_return / metrics)

Usage:
    from policyfolio.services.valuation import ValuationService, ProjectionEngine

    service = ValuationService()
    result = service.value(policy, subscription, as_of=date(2024, 6, 30))

    engine = ProjectionEngine(service)
    for point in engine.project(policy, subscription, as_of=date(2024, 6, 30)):
        ...

Architecture:
    valuation/
    ├── __init__.py              # This file - package exports
    ├── types.py                 # Result data classes
    ├── rates.py                 # RateModel (annual → period rate)
    ├── calculators.py           # Point-in-time calculators
    ├── service.py               # ValuationService (orchestrator)
    └── projections.py           # ProjectionEngine, annualized return

Data Flow:
    Policy → RateModel → period rate
    Subscription + as_of → ElapsedPeriodsCalculator → whole periods
    period rate + periods → CurrentValueCalculator → current value
    All Above → SubscriptionValuation
    SubscriptionValuation at future dates → ProjectionSeries
"""

from policyfolio.services.valuation.calculators import (
    SubscriptionValidator,
    ElapsedPeriodsCalculator,
    MaturityCalculator,
    CurrentValueCalculator,
    ProgressCalculator,
    compound,
)
from policyfolio.services.valuation.projections import (
    ProjectionEngine,
    ProjectionSeries,
    calculate_annualized_return,
)
from policyfolio.services.valuation.rates import RateModel
from policyfolio.services.valuation.service import ValuationService
from policyfolio.services.valuation.types import (
    SubscriptionValuation,
    ProjectionPoint,
    PerformanceMetrics,
    MaturityQuote,
    PolicyDetail,
)

__all__ = [
    # Main services
    "ValuationService",
    "ProjectionEngine",
    "RateModel",

    # Data types
    "SubscriptionValuation",
    "ProjectionPoint",
    "ProjectionSeries",
    "PerformanceMetrics",
    "MaturityQuote",
    "PolicyDetail",

    # Calculators (for testing)
    "SubscriptionValidator",
    "ElapsedPeriodsCalculator",
    "MaturityCalculator",
    "CurrentValueCalculator",
    "ProgressCalculator",
    "compound",
    "calculate_annualized_return",
]
