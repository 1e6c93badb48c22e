"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from agecalc.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from agecalc.services.result import ServiceResult

FIELD_ORDER = ("day", "month", "year")
_DATE_KEYS = frozenset({"date", "birth_date", "today"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        lines = [f"ERROR: {result.op}: {msg}"]
        lines.extend(f"{name}: {message}" for name, message in _field_errors(result))
        return "\n".join(lines)

    return _QUIET_RENDERERS[result.op](result.data)


# ── Helpers ───────────────────────────────────────────────────────────


def _field_errors(result: ServiceResult) -> list[tuple[str, str]]:
    """Field errors from ``error.detail`` in day, month, year order."""
    errors = result.field_errors
    ordered = [name for name in FIELD_ORDER if name in errors]
    ordered += [name for name in errors if name not in FIELD_ORDER]
    return [(name, errors[name]) for name in ordered]


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    line = Text("OK", style="age.ok")
    line.append(f"  {result.op}", style="age.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="age.key")
    line.append(str(value), style="age.date" if key in _DATE_KEYS else "")
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a span and its children with their timings."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = Text(f"{prefix}{name} ", style="dim")
    line.append(f"{duration:.2f}ms", style="age.warning" if duration > 100 else "age.ok")
    console.print(line)
    for key, value in span_data.get("annotations", {}).items():
        console.print(Text(f"{prefix}  {key}: {value}", style="dim"))
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="age.error")
    line.append(f"  {result.op}", style="age.op")
    line.append(f": {msg}")
    console.print(line)

    field_errors = _field_errors(result)
    if field_errors:
        table = Table(show_header=True, header_style="age.key", box=None, padding=(0, 2))
        table.add_column("Field", style="age.field")
        table.add_column("Problem")
        for name, message in field_errors:
            table.add_row(name, message)
        console.print(table)

    if verbose and err and err.detail:
        extra = {k: v for k, v in err.detail.items() if k != "errors"}
        if extra:
            console.print(Text("  detail:", style="dim"))
            for k, v in extra.items():
                console.print(Text(f"    {k}: {v}"))
    if verbose:
        _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_age(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the years / months / days breakdown."""
    _status_line(console, result)
    data = result.data
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(justify="right", style="age.value")
    table.add_column(style="age.unit")
    for unit in ("years", "months", "days"):
        table.add_row(str(data[unit]), unit)
    console.print(table)
    _field(console, "birth_date", data["birth_date"])
    _field(console, "today", data["today"])
    if "total_months" in data:
        _field(console, "total_months", data["total_months"])
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "date", result.data["date"])
    if verbose:
        _field(console, "today", result.data["today"])
        _render_meta(console, result)


def _render_check_day(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    status = result.data["status"]
    if status == "skipped":
        _field(console, "status", "skipped (day, month and year must all be numbers)")
    else:
        _field(console, "status", status)
    if verbose:
        _render_meta(console, result)


def _render_leap_year(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    verdict = "is a leap year" if data["leap"] else "is not a leap year"
    console.print(f"  {data['year']} {verdict} ({data['days']} days)")
    if verbose:
        _render_meta(console, result)


def _render_days_in_month(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    data = result.data
    console.print(f"  {data['year']:04d}-{data['month']:02d} has {data['days']} days")
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "calculate_age": _render_age,
    "validate_date": _render_validate,
    "check_day": _render_check_day,
    "leap_year": _render_leap_year,
    "days_in_month": _render_days_in_month,
}

_QUIET_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "calculate_age": lambda data: f"{data['years']} {data['months']} {data['days']}",
    "validate_date": lambda data: str(data["date"]),
    "check_day": lambda data: str(data["status"]),
    "leap_year": lambda data: "yes" if data["leap"] else "no",
    "days_in_month": lambda data: str(data["days"]),
}
