"""check: verify that every binary original is readable."""

from __future__ import annotations

import click

from cyberdocs.commands._base import DocsCommand
from cyberdocs.commands._context import AppContext


@click.command(
    cls=DocsCommand,
    examples="""\
  # Read every original once
  cyberdocs check

  # Machine-readable report
  cyberdocs --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Check that every document's original can be read."""
    app.emit(app.run(app.service.check_originals))
