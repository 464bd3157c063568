"""CatalogService: inspect the document table outside the server.

Backs the ``list``, ``check``, and ``show`` commands. Every operation
goes through the same producers the MCP handlers use.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cyberdocs.domain.errors import ResourceReadError
from cyberdocs.mcp.registry import plan_registrations
from cyberdocs.mcp.resources import binary_resource_impl, read_binary, text_resource_impl
from cyberdocs.mcp.tools import get_document_impl
from cyberdocs.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from cyberdocs.infrastructure.catalog import Catalog

logger = logging.getLogger(__name__)


class CatalogService:
    """Read-only operations over a :class:`Catalog`."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def list_registrations(self) -> ServiceResult:
        """Enumerate every resource and tool the server would register.

        Raises ConfigurationError on colliding identifiers, same as startup.
        """
        items = [
            {
                "document": reg.document,
                "kind": reg.kind.value,
                "key": reg.key,
                "name": reg.name,
                "mime_type": reg.mime_type,
            }
            for reg in plan_registrations(self._catalog)
        ]
        return ServiceResult.success(
            "list", items=items, count=len(items), documents=len(self._catalog)
        )

    async def check_originals(self) -> ServiceResult:
        """Read every binary original once and report the failures."""
        items: list[dict[str, Any]] = []
        failures: list[str] = []
        for doc in self._catalog:
            item: dict[str, Any] = {"id": doc.name, "uri": doc.binary_uri}
            try:
                data = await read_binary(doc)
            except ResourceReadError as exc:
                item.update(readable=False, reason=exc.reason)
                failures.append(doc.name)
            else:
                item.update(readable=True, bytes=len(data))
            items.append(item)

        logger.debug("Checked %d originals, %d unreadable", len(items), len(failures))
        if failures:
            return ServiceResult.failure(
                "check",
                ErrorCode.RESOURCE_READ_ERROR,
                f"{len(failures)} original(s) unreadable: {', '.join(failures)}",
                data={"items": items},
                items=items,
            )
        return ServiceResult.success("check", items=items, count=len(items))

    async def show(self, name: str, *, form: str = "text") -> ServiceResult:
        """Produce one document in the requested form."""
        doc = self._catalog.get(name)
        if doc is None:
            return ServiceResult.failure(
                "show",
                ErrorCode.UNKNOWN_DOCUMENT,
                f"No document named {name!r}",
                known=[d.name for d in self._catalog],
            )

        if form == "tool":
            envelope = get_document_impl(doc)
        elif form == "binary":
            try:
                envelope = await binary_resource_impl(doc)
            except ResourceReadError as exc:
                return ServiceResult.failure(
                    "show",
                    ErrorCode.RESOURCE_READ_ERROR,
                    str(exc),
                    uri=exc.uri,
                    path=str(exc.path),
                )
        else:
            envelope = text_resource_impl(doc)
        return ServiceResult.success("show", id=doc.name, form=form, **envelope)
