"""AgeService — birth date validation and age calculation behind ServiceResult.

The service takes one "today" snapshot per call and feeds it to both the
validator and the calculator, so a cycle never straddles midnight.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agecalc.domain.age import calculate_age
from agecalc.domain.calendar import is_leap_year, max_days_in_month
from agecalc.domain.types import CalendarDate, ValidationResult
from agecalc.domain.validation import validate, validate_day_against_month
from agecalc.services.result import ErrorCode, ServiceResult
from agecalc.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from agecalc.config.settings import AgeSettings

logger = logging.getLogger(__name__)


class AgeService:
    """Validate birth dates and compute ages.

    Usage::

        svc = AgeService(settings)
        result = svc.calculate("20", "1", "2000")
        if result.ok:
            print(result.data["age"])
    """

    def __init__(self, settings: AgeSettings) -> None:
        self._settings = settings

    def today(self) -> CalendarDate:
        """Reference date: the configured override or the local wall clock."""
        if self._settings.today is not None:
            return CalendarDate.from_date(self._settings.today)
        return CalendarDate.today()

    def _validate(self, day: str, month: str, year: str, today: CalendarDate) -> ValidationResult:
        rules = self._settings.validation
        with trace_span("validate") as span:
            outcome = validate(
                day,
                month,
                year,
                today,
                min_year=rules.min_year,
                reject_future_dates=rules.reject_future_dates,
            )
            if span:
                span.annotate("fields_failed", sorted(outcome.errors))
        return outcome

    @traced
    def validate(self, day: str, month: str, year: str) -> ServiceResult:
        """Validate the three fields without computing an age."""
        op = "validate_date"
        today = self.today()
        outcome = self._validate(day, month, year, today)
        if outcome.date is None:
            return _invalid(op, outcome)
        return ServiceResult.success(
            op, {"date": outcome.date.isoformat(), "today": today.isoformat()}
        )

    @traced
    def calculate(self, day: str, month: str, year: str) -> ServiceResult:
        """Validate the fields and, if valid, compute the age as of today."""
        op = "calculate_age"
        today = self.today()
        outcome = self._validate(day, month, year, today)
        birth = outcome.date
        if birth is None:
            return _invalid(op, outcome)

        warnings: list[str] = []
        if birth.as_tuple() > today.as_tuple():
            warnings.append(f"Birth date {birth} is later than today ({today})")

        with trace_span("calculate"):
            age = calculate_age(birth, today)
        logger.debug("Age calculated", extra={"op": op, "age": age.describe()})

        data: dict[str, object] = {
            "birth_date": birth.isoformat(),
            "today": today.isoformat(),
            "years": age.years,
            "months": age.months,
            "days": age.days,
            "age": age.describe(),
        }
        if self._settings.display.show_total_months:
            data["total_months"] = age.total_months
        return ServiceResult.success(op, data, warnings)

    @traced
    def check_day(self, day: str, month: str, year: str) -> ServiceResult:
        """Live day-versus-month check.

        ``data["status"]`` is ``"skipped"`` when a field is not numeric,
        ``"valid"`` when the day fits (clear any error), otherwise the
        result fails with the day's message.
        """
        op = "check_day"
        errors = validate_day_against_month(day, month, year)
        if errors is None:
            return ServiceResult.success(op, {"status": "skipped"})
        if errors:
            return ServiceResult.failure(
                op, ErrorCode.INVALID_DATE, errors["day"], field_errors=errors
            )
        return ServiceResult.success(op, {"status": "valid"})

    @traced
    def leap_year(self, year: int) -> ServiceResult:
        leap = is_leap_year(year)
        return ServiceResult.success(
            "leap_year", {"year": year, "leap": leap, "days": 366 if leap else 365}
        )

    @traced
    def days_in_month(self, month: int, year: int) -> ServiceResult:
        op = "days_in_month"
        try:
            days = max_days_in_month(month, year)
        except ValueError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_MONTH, str(exc), month=month)
        return ServiceResult.success(op, {"month": month, "year": year, "days": days})


def _invalid(op: str, outcome: ValidationResult) -> ServiceResult:
    logger.debug("Birth date rejected", extra={"op": op, "field_errors": outcome.errors})
    return ServiceResult.failure(
        op,
        ErrorCode.INVALID_DATE,
        f"Invalid birth date ({', '.join(outcome.errors)})",
        field_errors=outcome.errors,
    )
