"""Gregorian calendar rules: leap years and month lengths.

Leaf module. Works for any integer year (proleptic Gregorian), although
the validator only lets years from 1900 onward through.
"""

from __future__ import annotations

THIRTY_DAY_MONTHS: frozenset[int] = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return True if *year* has a February 29th."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_days_in_month(month: int, year: int) -> int:
    """Number of days in *month* (1-12) of *year*.

    Raises:
        ValueError: If *month* is outside 1-12. Callers validate the
            month range first; reaching this is a programming error.
    """
    if not 1 <= month <= 12:
        msg = f"month must be in 1-12, got {month}"
        raise ValueError(msg)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in THIRTY_DAY_MONTHS:
        return 30
    return 31


def days_in_previous_month(month: int, year: int) -> int:
    """Length of the month before *month*; January rolls back to December of ``year - 1``."""
    if month == 1:
        return max_days_in_month(12, year - 1)
    return max_days_in_month(month - 1, year)
