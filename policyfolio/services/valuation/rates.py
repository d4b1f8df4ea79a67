# policyfolio/services/valuation/rates.py
"""
Rate model: annual percentage rate → per-period compounding rate.

Formula:
    period_rate = (annual_rate_percent / 100) / periods_per_year

    DAILY   → 365 periods per year
    MONTHLY → 12 periods per year
    LUMPSUM → 1 period per year

Pure Decimal arithmetic, no rounding. Callers accumulate in full precision
and round once at the presentation boundary.
"""

from decimal import Decimal

from policyfolio.models import Policy, PolicyType
from policyfolio.services.constants import HUNDRED, PERIODS_PER_YEAR


class RateModel:
    """Stateless converter from annual rates to period rates."""

    @staticmethod
    def periods_per_year(policy_type: PolicyType) -> int:
        """Compounding periods in one year for the given policy type."""
        return PERIODS_PER_YEAR[PolicyType(policy_type)]

    @staticmethod
    def period_rate(annual_rate_percent: Decimal, periods_per_year: int) -> Decimal:
        """
        Convert an annual percentage rate into a per-period rate.

        Args:
            annual_rate_percent: Annual rate in percent (8 = 8%)
            periods_per_year: Compounding periods per year

        Returns:
            Rate per period as a decimal fraction (8% monthly → 0.00666...)

        Example:
            >>> RateModel.period_rate(Decimal("7.3"), 365)
            Decimal('0.0002')
        """
        return (Decimal(annual_rate_percent) / HUNDRED) / Decimal(periods_per_year)

    def rate_for(self, policy: Policy) -> Decimal:
        """Per-period rate for a policy's own compounding cadence."""
        return self.period_rate(
            policy.annual_rate_percent,
            self.periods_per_year(policy.policy_type),
        )

    def total_periods(self, policy: Policy) -> int:
        """Number of compounding periods over the policy's full duration."""
        return policy.duration_years * self.periods_per_year(policy.policy_type)
