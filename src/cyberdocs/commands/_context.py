"""AppContext: state shared by every subcommand via ``@click.pass_obj``.

Holds the resolved settings, builds the catalog on first use, runs async
service calls, and routes results to stdout or stderr with the right
exit status.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import anyio
import click

from cyberdocs.config.logging import configure_logging
from cyberdocs.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cyberdocs.config.settings import DocsSettings
    from cyberdocs.infrastructure.catalog import Catalog
    from cyberdocs.services.catalog import CatalogService
    from cyberdocs.services.result import ServiceResult


class AppContext:
    """Per-invocation context.

    Logging is configured as soon as the context exists. The catalog is
    deferred so ``--help`` and ``--examples`` never read summaries from
    disk; a ConfigurationError raised while building it is turned into a
    CLI error by :class:`~cyberdocs.commands._base.DocsCommand`.
    """

    def __init__(self, settings: DocsSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            from cyberdocs.infrastructure.catalog import Catalog

            self._catalog = Catalog.from_settings(self.settings)
        return self._catalog

    @property
    def service(self) -> CatalogService:
        from cyberdocs.services.catalog import CatalogService

        return CatalogService(self.catalog)

    def run(self, fn: Callable[..., Awaitable[ServiceResult]], *args: Any) -> ServiceResult:
        """Run an async service method to completion on a fresh event loop."""
        return anyio.run(fn, *args)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit 1 if it failed.

        Success goes to stdout with warnings on stderr (unless ``--json``,
        where warnings are part of the payload). Failure goes to stderr.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
