# policyfolio/services/exceptions.py
"""
Service layer exceptions.

These exceptions represent domain-specific errors and contain NO HTTP knowledge.
The (external) API layer is responsible for mapping them to user-facing
responses.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError
    │   ├── InvalidPolicyError
    │   ├── InvalidSubscriptionError
    │   ├── InvestmentLimitError
    │   └── PolicyUnavailableError
    ├── SubscriptionStateError
    └── ValuationError
        └── UndefinedReturnError

All failures are deterministic input problems. The engine performs no I/O,
so nothing here is transient or worth retrying.
"""

from datetime import date
from decimal import Decimal


class ServiceError(Exception):
    """
    Base exception for all service layer errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(ServiceError):
    """
    Raised when engine input is structurally invalid.

    Attributes:
        field: The field that failed validation (optional)
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidPolicyError(ValidationError):
    """Raised when a Policy violates its invariants (duration, rate, limits)."""


class InvalidSubscriptionError(ValidationError):
    """
    Raised when a subscription cannot be valued.

    Fatal to a single valuation call. The portfolio aggregator records it
    and carries on with the remaining subscriptions.

    Attributes:
        subscription_id: ID of the offending subscription
    """

    def __init__(
            self,
            subscription_id: str,
            message: str,
            field: str | None = None,
    ) -> None:
        self.subscription_id = subscription_id
        super().__init__(f"Subscription {subscription_id}: {message}", field=field)


class InvestmentLimitError(ValidationError):
    """
    Raised when an amount falls outside a policy's investment bounds.

    Attributes:
        amount: The rejected amount
        limit: The bound that was crossed
        bound: "min" or "max"
    """

    def __init__(self, amount: Decimal, limit: Decimal, bound: str) -> None:
        self.amount = amount
        self.limit = limit
        self.bound = bound
        if bound == "min":
            message = f"Minimum investment amount is {limit}, got {amount}"
        else:
            message = f"Maximum investment amount is {limit}, got {amount}"
        super().__init__(message, field="investment_amount")


class PolicyUnavailableError(ValidationError):
    """
    Raised when subscribing to a policy that is inactive or outside its
    validity window.

    Attributes:
        policy_id: ID of the policy
        as_of: Date the subscription was attempted
    """

    def __init__(self, policy_id: str | None, as_of: date) -> None:
        self.policy_id = policy_id
        self.as_of = as_of
        super().__init__(
            f"Policy {policy_id} is not open for subscription on {as_of.isoformat()}",
            field="policy_id",
        )


# =============================================================================
# LIFECYCLE ERRORS
# =============================================================================


class SubscriptionStateError(ServiceError):
    """
    Raised when a status transition is not allowed (e.g. cancelling a
    matured subscription).

    Attributes:
        subscription_id: ID of the subscription
        current_status: Status the subscription is in
        requested_status: Status that was requested
    """

    def __init__(
            self,
            subscription_id: str,
            current_status: str,
            requested_status: str,
    ) -> None:
        self.subscription_id = subscription_id
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Subscription {subscription_id} is not active "
            f"(status '{current_status}'), cannot move to '{requested_status}'"
        )


# =============================================================================
# VALUATION ERRORS
# =============================================================================


class ValuationError(ServiceError):
    """Base exception for degenerate valuation inputs."""


class UndefinedReturnError(ValuationError):
    """
    Raised when an annualized return has no meaning (zero whole years elapsed).

    Recovered by ProjectionEngine.annualized_return, which reports 0.
    """

    def __init__(self, start_date: date, as_of: date) -> None:
        self.start_date = start_date
        self.as_of = as_of
        super().__init__(
            f"Annualized return undefined: less than one whole year between "
            f"{start_date.isoformat()} and {as_of.isoformat()}"
        )
