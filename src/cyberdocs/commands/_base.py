"""DocsCommand: the Click command class every subcommand uses.

Adds two behaviours on top of ``click.Command``:

* an eager ``--examples`` flag that prints usage examples and exits, so
  ``--help`` stays short;
* translation of :class:`ConfigurationError` into ``click.ClickException``,
  so a bad document table exits 1 with a one-line message wherever it is
  detected (catalog build, registration plan, server start).
"""

from __future__ import annotations

from typing import Any

import click

from cyberdocs.domain.errors import ConfigurationError


def _examples_option(examples: str) -> click.Option:
    def print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=print_examples,
        help="Show usage examples.",
    )


class DocsCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except ConfigurationError as exc:
            raise click.ClickException(str(exc)) from exc
