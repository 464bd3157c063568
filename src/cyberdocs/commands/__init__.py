"""Subcommand modules for cyberdocs.

Provides register_commands() which uses deferred imports to keep
``cyberdocs --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from cyberdocs.commands.check import check
    from cyberdocs.commands.list_cmd import list_cmd
    from cyberdocs.commands.serve import serve
    from cyberdocs.commands.show import show

    cli.add_command(serve)
    cli.add_command(list_cmd)
    cli.add_command(check)
    cli.add_command(show)
