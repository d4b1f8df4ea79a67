# policyfolio/utils/date_utils.py
"""
Calendar arithmetic shared by the valuation services.

Elapsed time is always counted in WHOLE units with calendar semantics:
a month has elapsed once the start's day-of-month is reached again, a year
once twelve such months have elapsed. Counting does not clamp to the month
end, so a month started on the 31st is not complete until the next 31st
(or the 1st of the following month when the month is shorter). Results are
signed: they are negative when ``end`` precedes ``start``.

Shifting a date (``add_months``/``add_years``) does clamp the day to the
month end.

Usage:
    from policyfolio.utils.date_utils import months_between, add_years

    months_between(date(2024, 1, 15), date(2024, 3, 14))  # 1
    add_years(date(2024, 2, 29), 1)                      # date(2025, 2, 28)
"""

from datetime import date

from dateutil.relativedelta import relativedelta


def days_between(start: date, end: date) -> int:
    """Number of calendar days from start to end (negative if end < start)."""
    return (end - start).days


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end, truncated toward zero.

    Example:
        >>> months_between(date(2024, 1, 31), date(2024, 2, 29))
        0
        >>> months_between(date(2024, 1, 31), date(2024, 3, 31))
        2
        >>> months_between(date(2024, 3, 15), date(2024, 1, 20))
        -1
    """
    months = (end.year - start.year) * 12 + end.month - start.month
    if months > 0 and end.day < start.day:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months


def years_between(start: date, end: date) -> int:
    """Whole calendar years from start to end, truncated toward zero."""
    return int(months_between(start, end) / 12)


def add_months(d: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month end."""
    return d + relativedelta(months=months)


def add_years(d: date, years: int) -> date:
    """Shift a date by whole years (29 Feb maps to 28 Feb in non-leap years)."""
    return d + relativedelta(years=years)
