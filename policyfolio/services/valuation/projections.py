# policyfolio/services/valuation/projections.py
"""
Forward projections and return metrics for a single subscription.

- ProjectionSeries: lazy, restartable monthly projection of future values
- calculate_annualized_return(): pure return calculation
- ProjectionEngine: orchestrates both on top of ValuationService

Formulas:
    Projection steps = min(horizon, whole months from as_of to maturity)
    Point i (0..steps inclusive) is valued at as_of + i months

    total_return      = current_value / principal - 1
    annualized_return = (1 + total_return)^(1 / whole_years_elapsed) - 1

Precision Note:
    Decimal.__pow__() supports the non-integer exponent 1/years directly,
    so annualization stays in Decimal without a float round trip.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from decimal import Decimal, localcontext

from policyfolio.config import settings
from policyfolio.models import Policy, Subscription
from policyfolio.services.constants import ONE, ZERO
from policyfolio.services.exceptions import UndefinedReturnError
from policyfolio.services.valuation.service import ValuationService
from policyfolio.services.valuation.types import (
    PerformanceMetrics,
    PolicyDetail,
    ProjectionPoint,
)
from policyfolio.utils.date_utils import add_months, months_between, years_between

logger = logging.getLogger(__name__)


# =============================================================================
# PROJECTION SERIES
# =============================================================================

class ProjectionSeries:
    """
    Monthly projection of a subscription's value, from as_of forward.

    Nothing is computed until iteration. Each iteration starts from the
    first point again, and len() is known without valuing anything.

    Example:
        series = engine.project(policy, subscription, as_of=date(2024, 1, 15))
        for point in series:
            print(point.date, point.projected_value)
    """

    def __init__(
            self,
            valuation_service: ValuationService,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
            horizon_months: int,
    ) -> None:
        self._valuation_service = valuation_service
        self._policy = policy
        self._subscription = subscription
        self._as_of = as_of

        months_to_maturity = months_between(as_of, subscription.maturity_date)
        self._steps = max(0, min(horizon_months, months_to_maturity))

    def __iter__(self) -> Iterator[ProjectionPoint]:
        for step in range(self._steps + 1):
            point_date = add_months(self._as_of, step)
            valuation = self._valuation_service.value(
                self._policy, self._subscription, point_date
            )
            yield ProjectionPoint(
                date=point_date,
                projected_value=valuation.current_value,
                projected_gain=valuation.gain,
            )

    def __len__(self) -> int:
        return self._steps + 1

    @property
    def dates(self) -> list[date]:
        """Projection dates, without valuing anything."""
        return [add_months(self._as_of, step) for step in range(self._steps + 1)]


# =============================================================================
# ANNUALIZED RETURN
# =============================================================================

def calculate_annualized_return(
        principal: Decimal,
        current_value: Decimal,
        start_date: date,
        as_of: date,
) -> Decimal:
    """
    Annualize the total return over whole elapsed years.

    Args:
        principal: Amount invested (> 0)
        current_value: Value at as_of
        start_date: Subscription start
        as_of: Evaluation date

    Returns:
        Annualized return as a fraction (0.08 = 8%)

    Raises:
        UndefinedReturnError: If less than one whole year has elapsed
    """
    years = years_between(start_date, as_of)
    if years <= 0:
        raise UndefinedReturnError(start_date, as_of)

    total_return = current_value / principal - ONE
    base = ONE + total_return
    if base <= ZERO:
        return -ONE  # Total loss

    return base ** (ONE / Decimal(years)) - ONE


# =============================================================================
# PROJECTION ENGINE
# =============================================================================

class ProjectionEngine:
    """
    Read-only forward view of a subscription.

    Attributes:
        _valuation_service: Values the subscription at each date
        _horizon_months: Maximum monthly steps in a projection
        _precision: Decimal significant digits for return calculations
    """

    def __init__(
            self,
            valuation_service: ValuationService | None = None,
            horizon_months: int | None = None,
    ) -> None:
        self._valuation_service = valuation_service or ValuationService()
        self._horizon_months = (
            settings.projection_horizon_months if horizon_months is None else horizon_months
        )
        self._precision = settings.decimal_precision

    def project(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> ProjectionSeries:
        """
        Project the subscription's value month by month from as_of.

        Points run from as_of to min(horizon, months to maturity) months
        ahead, both ends included. Past maturity the series is the single
        point at as_of.
        """
        return ProjectionSeries(
            valuation_service=self._valuation_service,
            policy=policy,
            subscription=subscription,
            as_of=as_of,
            horizon_months=self._horizon_months,
        )

    def annualized_return(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> Decimal:
        """
        Annualized return at as_of, or 0 within the first whole year.

        Raises:
            InvalidSubscriptionError: If the subscription is structurally invalid
        """
        current_value = self._valuation_service.current_value(policy, subscription, as_of)
        try:
            with localcontext() as ctx:
                ctx.prec = self._precision
                return calculate_annualized_return(
                    principal=subscription.principal,
                    current_value=current_value,
                    start_date=subscription.start_date,
                    as_of=as_of,
                )
        except UndefinedReturnError as exc:
            logger.debug("%s; reporting 0", exc)
            return ZERO

    def metrics(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> PerformanceMetrics:
        """Return metrics for a subscription at as_of."""
        valuation = self._valuation_service.value(policy, subscription, as_of)
        return PerformanceMetrics(
            annualized_return=self.annualized_return(policy, subscription, as_of),
            current_yield=valuation.gain_percentage,
            days_to_maturity=valuation.days_remaining,
            progress_percentage=valuation.progress_percentage,
        )

    def policy_detail(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> PolicyDetail:
        """Valuation, projections and metrics of one subscription in one record."""
        return PolicyDetail(
            policy=policy,
            subscription=subscription,
            valuation=self._valuation_service.value(policy, subscription, as_of),
            projections=tuple(self.project(policy, subscription, as_of)),
            metrics=self.metrics(policy, subscription, as_of),
        )
