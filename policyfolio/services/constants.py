# policyfolio/services/constants.py
"""
Centralized constants for the valuation services.

Usage:
    from policyfolio.services.constants import DAYS_PER_YEAR, ZERO
"""

from decimal import Decimal

from policyfolio.models import PolicyType


# =============================================================================
# COMPOUNDING CALENDAR
# =============================================================================

# Daily policies compound on a 365-day year, leap years included
DAYS_PER_YEAR: int = 365

MONTHS_PER_YEAR: int = 12

# Compounding periods per year for each policy type
PERIODS_PER_YEAR: dict[PolicyType, int] = {
    PolicyType.DAILY: DAYS_PER_YEAR,
    PolicyType.MONTHLY: MONTHS_PER_YEAR,
    PolicyType.LUMPSUM: 1,
}


# =============================================================================
# DECIMAL HELPERS
# =============================================================================

ZERO: Decimal = Decimal("0")
ONE: Decimal = Decimal("1")
HUNDRED: Decimal = Decimal("100")
