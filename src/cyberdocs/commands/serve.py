"""serve: start the MCP documentation server."""

from __future__ import annotations

import click

from cyberdocs.commands._base import DocsCommand
from cyberdocs.commands._context import AppContext

TRANSPORTS = ["stdio", "sse", "streamable-http"]


@click.command(
    cls=DocsCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  cyberdocs serve

  # Streamable HTTP on custom host/port
  cyberdocs serve --transport streamable-http --host 0.0.0.0 --port 9000

  # Serve documents described in another config file, with debug logs
  cyberdocs -v -c ./cyberdocs.toml serve""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(TRANSPORTS),
    help="MCP transport protocol (default: [server] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server."""
    from cyberdocs.mcp.server import create_server

    transport = transport or app.settings.server.transport
    if transport not in TRANSPORTS:
        msg = f"unknown transport {transport!r}"
        raise click.BadParameter(msg, param_hint="[server] transport")

    server = create_server(app.settings, catalog=app.catalog, host=host, port=port)
    server.run(transport=transport)
