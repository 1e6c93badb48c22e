"""Commands: age calculation, date validation, and the live day check."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


def _is_interactive(app: AppContext) -> bool:
    """Return True when interactive prompts should fire.

    Prompts require: no ``--no-interact``, no ``--json``, and stdin is a TTY.
    """
    return not app.settings.no_interact and not app.settings.json_output and sys.stdin.isatty()


def _live_feedback(app: AppContext, day: str, month: str, year: str) -> None:
    """Echo the day-versus-month problem, if any, as soon as it is knowable."""
    if not day:
        return
    result = app.service.check_day(day, month, year)
    if not result.ok and result.error is not None:
        click.echo(f"  day: {result.error.message}", err=True)


def _collect_fields(
    app: AppContext,
    day: str | None,
    month: str | None,
    year: str | None,
) -> tuple[str, str, str]:
    """Fill in missing fields by prompting, or leave them empty."""
    if _is_interactive(app):
        if day is None:
            day = click.prompt("Day (DD)", default="", show_default=False)
        if month is None:
            month = click.prompt("Month (MM)", default="", show_default=False)
            _live_feedback(app, day or "", month or "", year or "")
        if year is None:
            year = click.prompt("Year (YYYY)", default="", show_default=False)
            _live_feedback(app, day or "", month or "", year or "")
    return day or "", month or "", year or ""


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc age 20 1 2000
  agecalc --today 2024-03-10 age 20 1 2000
  agecalc --json age 29 2 2024
  agecalc -q age 15 6 2000
  agecalc age            # prompts for day, month, and year""",
)
@click.argument("day", required=False)
@click.argument("month", required=False)
@click.argument("year", required=False)
@click.pass_obj
def age(app: AppContext, day: str | None, month: str | None, year: str | None) -> None:
    """Calculate age in years, months, and days from a birth date."""
    fields = _collect_fields(app, day, month, year)
    app.emit(app.service.calculate(*fields))


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc validate 29 2 2024
  agecalc --json validate 31 4 1999""",
)
@click.argument("day")
@click.argument("month")
@click.argument("year")
@click.pass_obj
def validate(app: AppContext, day: str, month: str, year: str) -> None:
    """Validate a birth date without calculating an age."""
    app.emit(app.service.validate(day, month, year))


@click.command(
    "check-day",
    cls=AgeCommand,
    examples="""\
  agecalc check-day 31 4 2023
  agecalc check-day 29 2 2024""",
)
@click.argument("day")
@click.argument("month")
@click.argument("year")
@click.pass_obj
def check_day(app: AppContext, day: str, month: str, year: str) -> None:
    """Check only that DAY fits within MONTH of YEAR."""
    app.emit(app.service.check_day(day, month, year))
