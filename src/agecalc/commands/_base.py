"""Click classes that add an eager ``--examples`` flag to agecalc commands.

Examples are given as a dedented block of invocations, one per line, and
printed under an "Examples" heading with Click's help formatter.
"""

from __future__ import annotations

import inspect
from typing import Any

import click


class _ExamplesMixin:
    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = inspect.cleandoc(examples) if examples else None
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or self.examples is None:
            return
        formatter = ctx.make_formatter()
        with formatter.section("Examples"):
            for line in self.examples.splitlines():
                formatter.write(f"{'':>{formatter.current_indent}}$ {line}\n")
        click.echo(formatter.getvalue(), nl=False)
        ctx.exit(0)


class AgeCommand(_ExamplesMixin, click.Command):
    pass


class AgeGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`AgeCommand` by default."""

    command_class = AgeCommand
