"""Age arithmetic: years, months, and days elapsed between two dates.

Borrowing works field by field. A negative day count borrows the length of
the calendar month before *today*'s month. A negative month count
borrows twelve months from the years.
"""

from __future__ import annotations

from agecalc.domain.calendar import days_in_previous_month
from agecalc.domain.types import AgeBreakdown, CalendarDate


def calculate_age(birth: CalendarDate, today: CalendarDate) -> AgeBreakdown:
    """Elapsed time from *birth* to *today*.

    *birth* is expected not to be after *today*. A later birth date yields
    a negative ``years`` value rather than an error.
    """
    years = today.year - birth.year
    months = today.month - birth.month
    days = today.day - birth.day

    if days < 0:
        months -= 1
        days += days_in_previous_month(today.month, today.year)

    if months < 0:
        years -= 1
        months += 12

    return AgeBreakdown(years=years, months=months, days=days)
