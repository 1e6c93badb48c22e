"""Value types shared by the validator and the age calculator.

CalendarDate and AgeBreakdown are frozen pydantic models. FieldErrors is a
plain mapping from field name to message; an empty mapping means valid.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, model_validator

from agecalc.domain.calendar import max_days_in_month

FieldErrors = dict[str, str]


class DateField(StrEnum):
    """Names of the three birth date input fields."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class CalendarDate(BaseModel):
    """A real Gregorian calendar date with no time-of-day component.

    INVARIANT: construction fails for impossible dates (Feb 30, day 0,
    month 13). Any integer year is accepted.
    """

    model_config = {"frozen": True}

    day: int
    month: int
    year: int

    @model_validator(mode="after")
    def _check_real_date(self) -> Self:
        if not 1 <= self.month <= 12:
            msg = f"month must be in 1-12, got {self.month}"
            raise ValueError(msg)
        limit = max_days_in_month(self.month, self.year)
        if not 1 <= self.day <= limit:
            msg = f"day must be in 1-{limit} for {self.year:04d}-{self.month:02d}, got {self.day}"
            raise ValueError(msg)
        return self

    @classmethod
    def from_date(cls, value: date) -> CalendarDate:
        return cls(day=value.day, month=value.month, year=value.year)

    @classmethod
    def today(cls) -> CalendarDate:
        """Local calendar date from the wall clock."""
        return cls.from_date(date.today())

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse an ISO ``YYYY-MM-DD`` string.

        Raises:
            ValueError: If *text* is not an ISO date.
        """
        return cls.from_date(date.fromisoformat(text.strip()))

    def as_tuple(self) -> tuple[int, int, int]:
        """``(year, month, day)`` for chronological comparison."""
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class AgeBreakdown(BaseModel):
    """Elapsed time between two dates as years, months, and days."""

    model_config = {"frozen": True}

    years: int
    months: int
    days: int

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    def describe(self) -> str:
        """Human-readable form, e.g. ``"24 years, 1 month, 18 days"``."""
        parts = [
            _plural(self.years, "year"),
            _plural(self.months, "month"),
            _plural(self.days, "day"),
        ]
        return ", ".join(parts)


class ValidationResult(BaseModel):
    """Outcome of validating the three birth date fields.

    Exactly one side is populated: ``date`` on success, ``errors`` on
    failure.
    """

    model_config = {"frozen": True}

    date: CalendarDate | None = None
    errors: FieldErrors = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors and self.date is not None


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if abs(count) == 1 else f"{count} {unit}s"
