"""Root CLI group for agecalc with global flags and command registration."""

from __future__ import annotations

from datetime import date

import click

from agecalc import __version__
from agecalc.commands import register_commands
from agecalc.commands._context import AppContext
from agecalc.config.settings import AgeSettings


def _parse_today(ctx: click.Context, _param: click.Parameter, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        msg = f"expected YYYY-MM-DD, got {value!r}"
        raise click.BadParameter(msg) from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="agecalc")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--today",
    callback=_parse_today,
    default=None,
    metavar="YYYY-MM-DD",
    help="Reference date instead of the local calendar date.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    today: date | None,
) -> None:
    """agecalc — birth date validation and age calculator."""
    settings = AgeSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        today=today,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
