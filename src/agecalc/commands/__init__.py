"""Subcommand modules for agecalc.

register_commands() imports command modules lazily to keep
``agecalc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the calendar group and the standalone commands on the root group."""
    from agecalc.commands.calendar import calendar

    cli.add_command(calendar)

    from agecalc.commands.age import age, check_day, validate

    cli.add_command(age)
    cli.add_command(validate)
    cli.add_command(check_day)
