"""FastMCP server setup.

Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mcp.server.fastmcp import FastMCP

from cyberdocs.infrastructure.catalog import Catalog
from cyberdocs.mcp.registry import register_documents

if TYPE_CHECKING:
    from cyberdocs.config.settings import DocsSettings

__all__ = ["create_server"]

logger = logging.getLogger(__name__)


def create_server(
    settings: DocsSettings,
    *,
    catalog: Catalog | None = None,
    host: str | None = None,
    port: int | None = None,
) -> FastMCP:
    """Create the MCP server with every document registered.

    Builds the catalog from *settings* unless one is given. The full
    registration plan is validated before the first handler is installed.
    *host* and *port* override ``[server]`` for HTTP transports and are
    ignored for stdio.

    Raises ConfigurationError if the document table is invalid.
    """
    if catalog is None:
        catalog = Catalog.from_settings(settings)

    server = FastMCP(
        settings.server.name,
        host=host if host is not None else settings.server.host,
        port=port if port is not None else settings.server.port,
        log_level="DEBUG" if settings.verbose else "WARNING",
    )
    registrations = register_documents(server, catalog.documents)
    logger.info(
        "Server %s ready with %d documents (%d handlers)",
        settings.server.name,
        len(catalog),
        len(registrations),
    )
    return server
