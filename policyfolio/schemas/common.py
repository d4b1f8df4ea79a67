# policyfolio/schemas/common.py
"""
Rounding helpers shared by the response schemas.

This is the ONLY place engine results are rounded. Services keep full
Decimal precision; schemas call these helpers when built from results.
"""

from decimal import Decimal, ROUND_HALF_UP

from policyfolio.config import settings

# Return fractions (0.081234) keep more digits than money or percentages
RATE_DECIMAL_PLACES = 6


def _quantum(places: int) -> Decimal:
    return Decimal(1).scaleb(-places)


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary amount to settings.money_decimal_places (half-up)."""
    return value.quantize(_quantum(settings.money_decimal_places), rounding=ROUND_HALF_UP)


def quantize_percentage(value: Decimal) -> Decimal:
    """Round a percentage to settings.percentage_decimal_places (half-up)."""
    return value.quantize(_quantum(settings.percentage_decimal_places), rounding=ROUND_HALF_UP)


def quantize_rate(value: Decimal) -> Decimal:
    """Round a return fraction to RATE_DECIMAL_PLACES (half-up)."""
    return value.quantize(_quantum(RATE_DECIMAL_PLACES), rounding=ROUND_HALF_UP)
