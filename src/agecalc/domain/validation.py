"""Birth date field validation.

Two entry points share the same day-versus-month rule:

- :func:`validate` — full submit-time validation of all three fields.
- :func:`validate_day_against_month` — live check run when month or year
  changes while a day is already entered.

Neither raises for user input. Problems come back as field-level messages.
"""

from __future__ import annotations

import re
from datetime import date

from agecalc.domain.calendar import is_leap_year, max_days_in_month
from agecalc.domain.types import CalendarDate, DateField, FieldErrors, ValidationResult

DEFAULT_MIN_YEAR = 1900

MSG_REQUIRED = "This field is required"
MSG_NOT_A_NUMBER = "Must be a valid number"
MSG_YEAR_TOO_EARLY = "Year must be {min_year} or later"
MSG_IN_THE_PAST = "Must be in the past"
MSG_MONTH_RANGE = "Must be a valid month (1-12)"
MSG_DAY_TOO_SMALL = "Must be at least 1"
MSG_DAY_TOO_LARGE = "Must be 31 or less"
MSG_LEAP_FEBRUARY = "February has 29 days this year"
MSG_DAY_FOR_MONTH = "Must be between 1 and {max_days}"
MSG_INVALID_DATE = "Must be a valid date"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_field(raw: str) -> int | None:
    """Parse a stripped field as a plain ASCII base-10 integer, or None.

    Digit-group underscores (``1_5``) and non-ASCII digits (``１５``) are
    not numbers here even though :func:`int` accepts them.
    """
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def day_limit(month: int, year: int) -> int:
    """Precise upper bound for the day field.

    A month outside 1-12 has no precise bound; the coarse limit of 31 applies.
    """
    if 1 <= month <= 12:
        return max_days_in_month(month, year)
    return 31


def day_limit_error(day: int, month: int, year: int) -> str | None:
    """Message for a day beyond its month's length, or None if it fits."""
    limit = day_limit(month, year)
    if day <= limit:
        return None
    if month == 2 and is_leap_year(year):
        return MSG_LEAP_FEBRUARY
    return MSG_DAY_FOR_MONTH.format(max_days=limit)


def validate(
    day_str: str,
    month_str: str,
    year_str: str,
    today: CalendarDate,
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    reject_future_dates: bool = False,
) -> ValidationResult:
    """Validate raw day/month/year strings against *today*.

    Every field is checked even when another has already failed.
    Missing and non-numeric fields skip the numeric checks for that field.
    """
    errors: dict[DateField, str] = {}
    raw = {DateField.DAY: day_str, DateField.MONTH: month_str, DateField.YEAR: year_str}
    values: dict[DateField, int] = {}

    for name, text in raw.items():
        if not text or not text.strip():
            errors[name] = MSG_REQUIRED
            continue
        parsed = parse_field(text)
        if parsed is None:
            errors[name] = MSG_NOT_A_NUMBER
            continue
        values[name] = parsed

    year = values.get(DateField.YEAR)
    month = values.get(DateField.MONTH)
    day = values.get(DateField.DAY)

    if year is not None:
        if year < min_year:
            errors[DateField.YEAR] = MSG_YEAR_TOO_EARLY.format(min_year=min_year)
        elif year > today.year:
            errors[DateField.YEAR] = MSG_IN_THE_PAST

    if month is not None and not 1 <= month <= 12:
        errors[DateField.MONTH] = MSG_MONTH_RANGE

    if day is not None:
        if day < 1:
            errors[DateField.DAY] = MSG_DAY_TOO_SMALL
        elif day > 31:
            errors[DateField.DAY] = MSG_DAY_TOO_LARGE
        elif month and year:
            message = day_limit_error(day, month, year)
            if message is not None:
                errors[DateField.DAY] = message

    if errors:
        return ValidationResult(errors=_plain(errors))

    day, month, year = values[DateField.DAY], values[DateField.MONTH], values[DateField.YEAR]
    try:
        built = date(year, month, day)
    except ValueError:
        return ValidationResult(errors={DateField.DAY.value: MSG_INVALID_DATE})
    if (built.day, built.month, built.year) != (day, month, year):
        return ValidationResult(errors={DateField.DAY.value: MSG_INVALID_DATE})

    birth = CalendarDate.from_date(built)
    if reject_future_dates and birth.as_tuple() > today.as_tuple():
        return ValidationResult(errors={DateField.DAY.value: MSG_IN_THE_PAST})
    return ValidationResult(date=birth)


def validate_day_against_month(day_str: str, month_str: str, year_str: str) -> FieldErrors | None:
    """Live check of the day field against the current month and year.

    Returns None when any field does not currently parse as a number
    (nothing to check). Returns an empty mapping when the day fits, which
    tells the caller to clear the day's error state.
    """
    day = parse_field(day_str)
    month = parse_field(month_str)
    year = parse_field(year_str)
    if day is None or month is None or year is None:
        return None

    if day < 1:
        return {DateField.DAY.value: MSG_DAY_TOO_SMALL}
    message = day_limit_error(day, month, year)
    if message is not None:
        return {DateField.DAY.value: message}
    return {}


def _plain(errors: dict[DateField, str]) -> FieldErrors:
    return {str(name): message for name, message in errors.items()}
