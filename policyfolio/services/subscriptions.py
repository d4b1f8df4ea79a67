# policyfolio/services/subscriptions.py
"""
Subscription lifecycle and policy catalog operations.

Operations:
- quote_maturity(): What an amount would grow to under a policy
- open_subscription(): Build a new ACTIVE subscription for a policy
- cancel() / mark_matured() / refresh_status(): Status transitions
- stats(): Counts and expected returns over a customer's subscriptions
- available_policies(): Catalog of policies open on a date

Subscriptions are immutable; every transition returns a new object and the
caller persists it. Allowed transitions:
    ACTIVE → MATURED
    ACTIVE → CANCELLED

Usage:
    service = SubscriptionService()
    subscription = service.open_subscription(
        policy,
        principal=Decimal("10000"),
        start_date=date(2024, 1, 15),
        issued_at=datetime(2024, 1, 15, 10, 30),
        customer_id="CUST-1",
    )
"""

from __future__ import annotations

import dataclasses
import logging
import secrets
import string
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from policyfolio.models import Policy, PolicyType, Subscription, SubscriptionStatus
from policyfolio.services.constants import ZERO
from policyfolio.services.exceptions import (
    InvestmentLimitError,
    PolicyUnavailableError,
    SubscriptionStateError,
    ValidationError,
)
from policyfolio.services.valuation.service import ValuationService
from policyfolio.services.valuation.types import MaturityQuote
from policyfolio.utils.date_utils import add_years

logger = logging.getLogger(__name__)

SUBSCRIPTION_ID_PREFIX = "SUB"
SUBSCRIPTION_ID_RANDOM_LENGTH = 6
SUBSCRIPTION_ID_TIMESTAMP_FORMAT = "%m%d%H%M%S"
_ID_ALPHABET = string.ascii_uppercase + string.digits


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class SubscriptionStats:
    """
    Headline numbers over a customer's subscriptions.

    Attributes:
        total_subscriptions: Subscriptions in any status
        active_subscriptions: ACTIVE subscriptions
        total_investment: Summed principal of ACTIVE subscriptions
        expected_returns: Summed expected maturity amount of ACTIVE
            subscriptions minus total_investment
    """

    total_subscriptions: int
    active_subscriptions: int
    total_investment: Decimal
    expected_returns: Decimal

    @property
    def estimated_total(self) -> Decimal:
        return self.total_investment + self.expected_returns


@dataclass(frozen=True)
class PolicyCatalog:
    """
    Policies open for subscription on a date.

    Attributes:
        policies: Valid policies, highest rate first
        by_type: Count per policy type, in first-encounter order
    """

    policies: list[Policy]
    by_type: dict[PolicyType, int]

    @property
    def total_available(self) -> int:
        return len(self.policies)


# =============================================================================
# SERVICE
# =============================================================================

class SubscriptionService:
    """
    Creates subscriptions and moves them through their lifecycle.

    Attributes:
        _valuation_service: Computes expected maturity amounts
    """

    def __init__(self, valuation_service: ValuationService | None = None) -> None:
        self._valuation_service = valuation_service or ValuationService()

    # =========================================================================
    # QUOTES & CREATION
    # =========================================================================

    def quote_maturity(self, policy: Policy, investment_amount: Decimal) -> MaturityQuote:
        """
        Quote the full-term maturity amount for an investment.

        Raises:
            ValidationError: If investment_amount is not positive
            InvestmentLimitError: If the amount is outside the policy's bounds
        """
        amount = Decimal(str(investment_amount))
        self._check_investment(policy, amount)

        return MaturityQuote(
            policy=policy,
            investment_amount=amount,
            maturity_amount=self._valuation_service.expected_maturity_amount(policy, amount),
        )

    def open_subscription(
            self,
            policy: Policy,
            principal: Decimal,
            start_date: date,
            issued_at: datetime,
            customer_id: str | None = None,
            subscription_id: str | None = None,
    ) -> Subscription:
        """
        Create a new ACTIVE subscription.

        maturity_date = start_date + duration_years years, and the expected
        maturity amount is fixed here at full precision.

        Args:
            policy: Policy being subscribed to
            principal: Amount invested
            start_date: First day of the subscription
            issued_at: Creation timestamp, used in the generated ID
            customer_id: Owning customer
            subscription_id: Explicit ID (generated when omitted)

        Raises:
            PolicyUnavailableError: If the policy is not open on start_date
            ValidationError: If principal is not positive
            InvestmentLimitError: If principal is outside the policy's bounds
        """
        if not policy.is_valid(start_date):
            raise PolicyUnavailableError(policy.policy_id, start_date)

        quote = self.quote_maturity(policy, principal)

        subscription = Subscription(
            subscription_id=subscription_id or generate_subscription_id(issued_at),
            customer_id=customer_id,
            policy_id=policy.policy_id,
            principal=quote.investment_amount,
            start_date=start_date,
            maturity_date=add_years(start_date, policy.duration_years),
            expected_maturity_amount=quote.maturity_amount,
            status=SubscriptionStatus.ACTIVE,
        )

        logger.info(
            "Opened subscription %s on policy %s (principal=%s, maturity=%s)",
            subscription.subscription_id,
            policy.policy_id,
            subscription.principal,
            subscription.maturity_date.isoformat(),
        )
        return subscription

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def cancel(self, subscription: Subscription) -> Subscription:
        """
        Cancel an ACTIVE subscription.

        Raises:
            SubscriptionStateError: If the subscription is not ACTIVE
        """
        return self._transition(subscription, SubscriptionStatus.CANCELLED)

    def mark_matured(self, subscription: Subscription) -> Subscription:
        """
        Mark an ACTIVE subscription as matured, regardless of date.

        Raises:
            SubscriptionStateError: If the subscription is not ACTIVE
        """
        return self._transition(subscription, SubscriptionStatus.MATURED)

    def refresh_status(self, subscription: Subscription, as_of: date) -> Subscription:
        """
        Move an ACTIVE subscription to MATURED once as_of reaches maturity.

        Anything else is returned unchanged.
        """
        if subscription.is_active and as_of >= subscription.maturity_date:
            return self._transition(subscription, SubscriptionStatus.MATURED)
        return subscription

    # =========================================================================
    # REPORTING
    # =========================================================================

    @staticmethod
    def stats(subscriptions: Iterable[Subscription]) -> SubscriptionStats:
        """Counts and expected returns, in a single pass."""
        total = 0
        active = 0
        total_investment = ZERO
        total_expected = ZERO

        for subscription in subscriptions:
            total += 1
            if not subscription.is_active:
                continue
            active += 1
            total_investment += subscription.principal
            total_expected += subscription.expected_maturity_amount

        return SubscriptionStats(
            total_subscriptions=total,
            active_subscriptions=active,
            total_investment=total_investment,
            expected_returns=total_expected - total_investment,
        )

    @staticmethod
    def available_policies(policies: Iterable[Policy], as_of: date) -> PolicyCatalog:
        """Policies open on as_of, highest annual rate first, with per-type counts."""
        valid = sorted(
            (policy for policy in policies if policy.is_valid(as_of)),
            key=lambda p: p.annual_rate_percent,
            reverse=True,
        )

        by_type: dict[PolicyType, int] = {}
        for policy in valid:
            by_type[policy.policy_type] = by_type.get(policy.policy_type, 0) + 1

        return PolicyCatalog(policies=valid, by_type=by_type)

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _check_investment(policy: Policy, amount: Decimal) -> None:
        if amount <= ZERO:
            raise ValidationError(
                f"Investment amount must be positive, got {amount}",
                field="investment_amount",
            )
        if policy.min_investment is not None and amount < policy.min_investment:
            raise InvestmentLimitError(amount, policy.min_investment, bound="min")
        if policy.max_investment is not None and amount > policy.max_investment:
            raise InvestmentLimitError(amount, policy.max_investment, bound="max")

    @staticmethod
    def _transition(subscription: Subscription, target: SubscriptionStatus) -> Subscription:
        if not subscription.is_active:
            raise SubscriptionStateError(
                subscription.subscription_id,
                subscription.status.value,
                target.value,
            )

        logger.info(
            "Subscription %s: %s -> %s",
            subscription.subscription_id,
            subscription.status.value,
            target.value,
        )
        return dataclasses.replace(subscription, status=target)


def generate_subscription_id(issued_at: datetime) -> str:
    """
    Build an ID like "SUBK3J9QZ0615103000".

    Format: "SUB" + 6 random uppercase alphanumerics + issued_at as MMDDHHMMSS.
    """
    random_part = "".join(
        secrets.choice(_ID_ALPHABET) for _ in range(SUBSCRIPTION_ID_RANDOM_LENGTH)
    )
    return (
        f"{SUBSCRIPTION_ID_PREFIX}{random_part}"
        f"{issued_at.strftime(SUBSCRIPTION_ID_TIMESTAMP_FORMAT)}"
    )
