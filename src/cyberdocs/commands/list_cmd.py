"""list: enumerate every resource and tool the server registers."""

from __future__ import annotations

import click

from cyberdocs.commands._base import DocsCommand
from cyberdocs.commands._context import AppContext


@click.command(
    "list",
    cls=DocsCommand,
    examples="""\
  # Table of registrations
  cyberdocs list

  # Include resource names and MIME types
  cyberdocs -v list

  # URIs and tool names only, one per line
  cyberdocs -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered resources and tools."""
    app.emit(app.service.list_registrations())
