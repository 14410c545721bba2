"""Click command classes carrying ready-to-run examples.

Commands declare ``examples=`` next to their options. ``--help`` only
mentions that examples exist; ``savctl <cmd> --examples`` prints them and
exits before the callback runs, so no settings or database are touched.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for sample invocations."


class ExamplesMixin:
    """Shared ``examples`` handling for commands and groups."""

    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(EXAMPLES_HINT)


class SavCommand(ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class SavGroup(ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`SavCommand` by default."""

    command_class = SavCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
