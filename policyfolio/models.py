# policyfolio/models.py
"""
Domain value objects supplied to the valuation engine.

Policies and subscriptions are owned by the storage layer. The engine only
ever receives them as immutable values, already joined (a subscription is
always handed over together with its Policy), and never writes them back.

Status changes produce NEW Subscription objects; see
policyfolio.services.subscriptions.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal


class PolicyType(str, enum.Enum):
    """
    Compounding cadence of a policy.

    DAILY and MONTHLY policies compound once per day / month on the amount
    contributed so far. LUMPSUM ("digital gold") compounds annually on a
    single up-front investment.
    """
    DAILY = "daily"
    MONTHLY = "monthly"
    LUMPSUM = "lumpsum"

    @classmethod
    def _missing_(cls, value: object) -> PolicyType | None:
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "digital_gold":
                return cls.LUMPSUM
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class SubscriptionStatus(str, enum.Enum):
    """
    Subscription lifecycle status.

    State transitions:
        ACTIVE → MATURED (maturity date reached, or marked explicitly)
        ACTIVE → CANCELLED (explicit cancellation)

    MATURED and CANCELLED are terminal.
    """
    ACTIVE = "active"
    MATURED = "matured"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not SubscriptionStatus.ACTIVE


def _as_decimal(value: Decimal | int | str | float | None) -> Decimal | None:
    if value is None or isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr (0.1 -> "0.1")
    return Decimal(str(value))


@dataclass(frozen=True)
class Policy:
    """
    An investment policy from the catalog (shared, read-only reference data).

    Attributes:
        policy_type: Compounding cadence (DAILY, MONTHLY, LUMPSUM)
        duration_years: Term of the policy in whole years (> 0)
        annual_rate_percent: Annual interest rate in percent (7.5 = 7.5%)
        min_investment: Minimum accepted investment (None = no minimum)
        max_investment: Maximum accepted investment (None = no maximum)
        policy_id: Storage identifier
        policy_number: Human-facing policy number
        name: Display name
        is_active: Whether the policy is open for new subscriptions
        valid_from: First date the policy can be subscribed to (None = open)
        valid_to: Last date the policy can be subscribed to (None = open)

    Raises:
        InvalidPolicyError: On non-positive duration, negative rate, or
            max_investment below min_investment
    """

    policy_type: PolicyType
    duration_years: int
    annual_rate_percent: Decimal
    min_investment: Decimal | None = None
    max_investment: Decimal | None = None
    policy_id: str | None = None
    policy_number: str | None = None
    name: str | None = None
    is_active: bool = True
    valid_from: date | None = None
    valid_to: date | None = None

    def __post_init__(self) -> None:
        # Lazy import to avoid circular dependencies
        from policyfolio.services.exceptions import InvalidPolicyError

        object.__setattr__(self, "policy_type", PolicyType(self.policy_type))
        object.__setattr__(self, "annual_rate_percent", _as_decimal(self.annual_rate_percent))
        object.__setattr__(self, "min_investment", _as_decimal(self.min_investment))
        object.__setattr__(self, "max_investment", _as_decimal(self.max_investment))

        if self.duration_years <= 0:
            raise InvalidPolicyError(
                f"Policy duration must be a positive number of years, got {self.duration_years}",
                field="duration_years",
            )
        if self.annual_rate_percent < 0:
            raise InvalidPolicyError(
                f"Annual rate cannot be negative, got {self.annual_rate_percent}",
                field="annual_rate_percent",
            )
        if (
                self.min_investment is not None
                and self.max_investment is not None
                and self.max_investment < self.min_investment
        ):
            raise InvalidPolicyError(
                f"max_investment ({self.max_investment}) is below "
                f"min_investment ({self.min_investment})",
                field="max_investment",
            )

    def is_valid(self, as_of: date) -> bool:
        """True if the policy is active and as_of lies within its validity window."""
        if not self.is_active:
            return False
        if self.valid_from is not None and as_of < self.valid_from:
            return False
        if self.valid_to is not None and as_of > self.valid_to:
            return False
        return True


@dataclass(frozen=True)
class Subscription:
    """
    One customer's enrollment in one policy.

    Attributes:
        subscription_id: Identifier (e.g. "SUBK3J9QZ0615103000")
        customer_id: Owning customer
        policy_id: Referenced policy
        principal: Amount invested. For DAILY/MONTHLY policies this is the
            total contributed so far, compounded like a lumpsum.
        start_date: First day of the subscription
        maturity_date: start_date + policy.duration_years years
        expected_maturity_amount: Full-duration value, fixed at creation
        status: Lifecycle status

    Note:
        Structural validity (principal > 0, maturity after start) is checked
        by the valuation engine, which reports InvalidSubscriptionError per
        subscription instead of failing at construction time. Records loaded
        from storage may be inconsistent and must still be reportable.
    """

    subscription_id: str
    customer_id: str | None
    policy_id: str | None
    principal: Decimal
    start_date: date
    maturity_date: date
    expected_maturity_amount: Decimal
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "principal", _as_decimal(self.principal))
        object.__setattr__(
            self, "expected_maturity_amount", _as_decimal(self.expected_maturity_amount)
        )
        object.__setattr__(self, "status", SubscriptionStatus(self.status))

    @property
    def is_active(self) -> bool:
        return self.status is SubscriptionStatus.ACTIVE
