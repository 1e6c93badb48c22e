"""Command group: Gregorian calendar lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeGroup

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


@click.group(
    cls=AgeGroup,
    examples="""\
  agecalc calendar leap 2024
  agecalc calendar days 2 2023""",
)
@click.pass_obj
def calendar(app: AppContext) -> None:
    """Leap year and month length lookups."""


@calendar.command(
    examples="""\
  agecalc calendar leap 2000
  agecalc -q calendar leap 1900"""
)
@click.argument("year", type=int)
@click.pass_obj
def leap(app: AppContext, year: int) -> None:
    """Report whether YEAR is a leap year."""
    app.emit(app.service.leap_year(year))


@calendar.command(
    examples="""\
  agecalc calendar days 2 2024
  agecalc --json calendar days 4 2023"""
)
@click.argument("month", type=int)
@click.argument("year", type=int)
@click.pass_obj
def days(app: AppContext, month: int, year: int) -> None:
    """Report how many days MONTH has in YEAR."""
    app.emit(app.service.days_in_month(month, year))
