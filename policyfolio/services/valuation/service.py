# policyfolio/services/valuation/service.py
"""
Valuation Service - single entry point for subscription valuation.

Operations:
- value(): Complete point-in-time valuation of one subscription
- current_value(): Just the value at a date
- expected_maturity_amount(): Full-duration amount for a policy and principal

Design Principles:
- Dependency Injection: RateModel injected via constructor
- Explicit clock: every call takes the as-of date
- No storage knowledge: receives Policy and Subscription pre-joined
- Composable: delegates to the calculators in calculators.py

Usage:
    from policyfolio.services.valuation import ValuationService

    service = ValuationService()
    result = service.value(policy, subscription, as_of=date(2024, 6, 30))
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, localcontext

from policyfolio.config import settings
from policyfolio.models import Policy, Subscription
from policyfolio.services.valuation.calculators import (
    CurrentValueCalculator,
    ElapsedPeriodsCalculator,
    MaturityCalculator,
    ProgressCalculator,
    SubscriptionValidator,
)
from policyfolio.services.valuation.rates import RateModel
from policyfolio.services.valuation.types import SubscriptionValuation

logger = logging.getLogger(__name__)


class ValuationService:
    """
    Values subscriptions under the three compounding models.

    All arithmetic runs in a local Decimal context with
    settings.decimal_precision significant digits. Nothing is rounded to
    presentation precision here.

    Attributes:
        _rate_model: Annual → period rate conversion
        _validator: Structural checks on subscriptions
        _elapsed_calc: Whole periods elapsed
        _value_calc: Current value
        _maturity_calc: Full-duration amount
        _progress_calc: Progress and days remaining
    """

    def __init__(
            self,
            rate_model: RateModel | None = None,
            precision: int | None = None,
    ) -> None:
        """
        Initialize the valuation service.

        Args:
            rate_model: Rate converter. A default RateModel if None.
            precision: Decimal significant digits. settings.decimal_precision if None.
        """
        self._rate_model = rate_model or RateModel()
        self._precision = settings.decimal_precision if precision is None else precision

        self._validator = SubscriptionValidator()
        self._elapsed_calc = ElapsedPeriodsCalculator(self._rate_model)
        self._value_calc = CurrentValueCalculator(self._rate_model, self._elapsed_calc)
        self._maturity_calc = MaturityCalculator(self._rate_model)
        self._progress_calc = ProgressCalculator()

        logger.debug("ValuationService initialized (precision=%d)", self._precision)

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def value(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> SubscriptionValuation:
        """
        Value a subscription at a date.

        Args:
            policy: The subscription's policy
            subscription: Subscription to value
            as_of: Evaluation date

        Returns:
            SubscriptionValuation with value, gain, progress and maturity info

        Raises:
            InvalidSubscriptionError: If principal <= 0 or maturity_date <= start_date
        """
        self._validator.validate(subscription)

        with localcontext() as ctx:
            ctx.prec = self._precision

            current_value = self._value_calc.calculate(policy, subscription, as_of)
            gain = current_value - subscription.principal
            progress = self._progress_calc.progress_percentage(subscription, as_of)

        result = SubscriptionValuation(
            subscription_id=subscription.subscription_id,
            valuation_date=as_of,
            principal=subscription.principal,
            current_value=current_value,
            gain=gain,
            progress_percentage=progress,
            is_matured=as_of >= subscription.maturity_date,
            days_remaining=self._progress_calc.days_remaining(subscription, as_of),
            elapsed_periods=self._elapsed_calc.calculate(policy, subscription, as_of),
            maturity_value=subscription.expected_maturity_amount,
        )

        logger.debug(
            "Valued subscription %s at %s: value=%s gain=%s",
            subscription.subscription_id,
            as_of.isoformat(),
            current_value,
            gain,
        )
        return result

    def current_value(
            self,
            policy: Policy,
            subscription: Subscription,
            as_of: date,
    ) -> Decimal:
        """
        Value of a subscription at a date.

        Raises:
            InvalidSubscriptionError: If the subscription is structurally invalid
        """
        return self.value(policy, subscription, as_of).current_value

    def expected_maturity_amount(self, policy: Policy, principal: Decimal) -> Decimal:
        """
        Amount a principal grows to over the policy's full duration.

        This is the figure stored on a subscription at creation time.
        """
        with localcontext() as ctx:
            ctx.prec = self._precision
            return self._maturity_calc.calculate(policy, Decimal(str(principal)))
