"""show: print one document the way a client would receive it."""

from __future__ import annotations

import functools

import click

from cyberdocs.commands._base import DocsCommand
from cyberdocs.commands._context import AppContext

FORMS = ("text", "tool", "binary")


@click.command(
    cls=DocsCommand,
    examples="""\
  # Markdown summary
  cyberdocs show spec-1

  # Retrieval tool answer
  cyberdocs show spec-1 --form tool

  # Binary resource envelope (base64)
  cyberdocs show spec-2 --form binary""",
)
@click.argument("name")
@click.option(
    "--form",
    default="text",
    type=click.Choice(FORMS),
    help="Representation to print.",
)
@click.pass_obj
def show(app: AppContext, name: str, form: str) -> None:
    """Print document NAME in the chosen form."""
    app.emit(app.run(functools.partial(app.service.show, name, form=form)))
