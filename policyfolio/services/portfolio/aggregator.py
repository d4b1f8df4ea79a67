# policyfolio/services/portfolio/aggregator.py
"""
Portfolio Aggregator - sums a customer's subscriptions into portfolio views.

Operations:
- aggregate(): Summary, breakdown by type and duration, per-policy holdings
- performance_history(): Trailing monthly investment/value series
- upcoming_maturities(): Active subscriptions maturing soonest

Design Principles:
- Read-only: never mutates subscriptions or any cached portfolio record
- Pre-joined input: (Subscription, Policy) pairs, no lookups
- Partial failure: an invalid subscription is reported in ``failures`` and
  the rest of the portfolio is still valued
- Single reduction pass into fixed-field BreakdownGroup records

Usage:
    aggregator = PortfolioAggregator()
    portfolio = aggregator.aggregate(holdings, as_of=date(2024, 6, 30))
    portfolio.summary.total_current_value
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from policyfolio.config import settings
from policyfolio.models import Policy, PolicyType, Subscription
from policyfolio.services.constants import ZERO
from policyfolio.services.exceptions import InvalidSubscriptionError
from policyfolio.services.portfolio.types import (
    BreakdownGroup,
    PerformancePoint,
    PolicyHolding,
    PortfolioSummary,
    PortfolioValuation,
    ValuationFailure,
)
from policyfolio.services.valuation.service import ValuationService
from policyfolio.services.valuation.types import SubscriptionValuation
from policyfolio.utils.date_utils import add_months

logger = logging.getLogger(__name__)

Holding = tuple[Subscription, Policy]


class PortfolioAggregator:
    """
    Aggregates active subscriptions into portfolio-level results.

    Attributes:
        _valuation_service: Values each subscription
    """

    def __init__(self, valuation_service: ValuationService | None = None) -> None:
        self._valuation_service = valuation_service or ValuationService()

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def aggregate(self, holdings: Iterable[Holding], as_of: date) -> PortfolioValuation:
        """
        Value every active subscription and roll the results up.

        Args:
            holdings: (Subscription, Policy) pairs for one customer
            as_of: Evaluation date

        Returns:
            PortfolioValuation. Groups keep first-encounter order of the
            input; ``policies`` is sorted by ascending maturity date.
        """
        valued, failures = self._value_active(holdings, as_of)

        by_type: dict[PolicyType, BreakdownGroup] = {}
        by_duration: dict[int, BreakdownGroup] = {}
        total_investment = ZERO
        total_current_value = ZERO
        total_gain = ZERO

        for holding in valued:
            total_investment += holding.investment_amount
            total_current_value += holding.current_value
            total_gain += holding.gain
            by_type.setdefault(holding.policy_type, BreakdownGroup()).add(holding)
            by_duration.setdefault(holding.duration_years, BreakdownGroup()).add(holding)

        summary = PortfolioSummary(
            total_investment=total_investment,
            total_current_value=total_current_value,
            total_gain=total_gain,
            total_policies=len(valued),
        )

        logger.info(
            "Aggregated %d subscriptions at %s (%d skipped)",
            len(valued),
            as_of.isoformat(),
            len(failures),
        )

        return PortfolioValuation(
            valuation_date=as_of,
            summary=summary,
            by_type=by_type,
            by_duration=by_duration,
            policies=sorted(valued, key=lambda h: h.maturity_date),
            failures=failures,
        )

    def performance_history(
            self,
            holdings: Iterable[Holding],
            as_of: date,
            months: int | None = None,
    ) -> list[PerformancePoint]:
        """
        Trailing monthly investment and value, oldest point first.

        Point i is dated ``as_of - (months - 1 - i) months``, so the last
        point is as_of itself. A subscription counts from its start date on.
        Invalid subscriptions are left out of every point and logged once.

        Args:
            holdings: (Subscription, Policy) pairs
            as_of: Date of the most recent point
            months: Number of points (default: settings.performance_history_months)
        """
        if months is None:
            months = settings.performance_history_months
        active = [(sub, policy) for sub, policy in holdings if sub.is_active]

        points: list[PerformancePoint] = []
        skipped: set[str] = set()
        for offset in range(months - 1, -1, -1):
            point_date = add_months(as_of, -offset)
            investment = ZERO
            value = ZERO

            for subscription, policy in active:
                if subscription.start_date > point_date:
                    continue
                try:
                    valuation = self._valuation_service.value(policy, subscription, point_date)
                except InvalidSubscriptionError as exc:
                    if subscription.subscription_id not in skipped:
                        skipped.add(subscription.subscription_id)
                        logger.warning(
                            "Skipping subscription %s: %s",
                            subscription.subscription_id,
                            exc.message,
                            extra={"subscription_id": subscription.subscription_id},
                        )
                    continue
                investment += subscription.principal
                value += valuation.current_value

            points.append(PerformancePoint(date=point_date, investment=investment, value=value))

        return points

    def upcoming_maturities(
            self,
            holdings: Iterable[Holding],
            as_of: date,
            limit: int | None = None,
    ) -> list[PolicyHolding]:
        """
        Active subscriptions maturing on or after as_of, soonest first.

        Args:
            holdings: (Subscription, Policy) pairs
            as_of: Evaluation date
            limit: Maximum results (default: settings.upcoming_maturities_limit)
        """
        if limit is None:
            limit = settings.upcoming_maturities_limit
        pending = [
            (subscription, policy)
            for subscription, policy in holdings
            if subscription.maturity_date >= as_of
        ]
        valued, _ = self._value_active(pending, as_of)
        valued.sort(key=lambda h: h.maturity_date)
        return valued[:limit]

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _value_active(
            self,
            holdings: Iterable[Holding],
            as_of: date,
    ) -> tuple[list[PolicyHolding], list[ValuationFailure]]:
        """Value active subscriptions in input order, collecting failures."""
        valued: list[PolicyHolding] = []
        failures: list[ValuationFailure] = []

        for subscription, policy in holdings:
            if not subscription.is_active:
                continue
            try:
                valuation = self._valuation_service.value(policy, subscription, as_of)
            except InvalidSubscriptionError as exc:
                logger.warning(
                    "Skipping subscription %s: %s",
                    subscription.subscription_id,
                    exc.message,
                    extra={"subscription_id": subscription.subscription_id},
                )
                failures.append(ValuationFailure(
                    subscription_id=subscription.subscription_id,
                    reason=exc.message,
                    field=exc.field,
                ))
                continue

            valued.append(self._build_holding(subscription, policy, valuation))

        return valued, failures

    @staticmethod
    def _build_holding(
            subscription: Subscription,
            policy: Policy,
            valuation: SubscriptionValuation,
    ) -> PolicyHolding:
        return PolicyHolding(
            subscription_id=subscription.subscription_id,
            policy_id=policy.policy_id,
            policy_number=policy.policy_number,
            policy_name=policy.name,
            policy_type=policy.policy_type,
            duration_years=policy.duration_years,
            interest_rate=policy.annual_rate_percent,
            status=subscription.status,
            investment_amount=subscription.principal,
            current_value=valuation.current_value,
            gain=valuation.gain,
            start_date=subscription.start_date,
            maturity_date=subscription.maturity_date,
            days_remaining=valuation.days_remaining,
            progress_percentage=valuation.progress_percentage,
            is_matured=valuation.is_matured,
            expected_maturity_amount=subscription.expected_maturity_amount,
        )
