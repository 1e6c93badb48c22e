"""Rich Console factory and theme for agecalc output.

Consoles render into a StringIO buffer so formatters keep returning
plain strings. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

AGE_THEME = Theme(
    {
        "age.ok": "bold green",
        "age.error": "bold red",
        "age.warning": "bold yellow",
        "age.op": "bold cyan",
        "age.key": "dim",
        "age.field": "bold",
        "age.value": "bold magenta",
        "age.unit": "italic",
        "age.date": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=AGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
