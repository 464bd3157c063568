"""MCP resource producers, two resources per document.

Binary form: ``resource://<namespace>/<doc>.docx`` (base64 blob).
Text form:   ``resource://<namespace>/<doc>.md`` (markdown text).
Each form has an ``*_impl`` function returning the content envelope,
testable without the mcp package, and a handler factory for the runtime.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from cyberdocs.domain.documents import DocumentDefinition
from cyberdocs.domain.errors import ResourceReadError
from cyberdocs.infrastructure.filesystem import read_bytes

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Binary form
# ---------------------------------------------------------------------------


async def read_binary(document: DocumentDefinition) -> bytes:
    """Read the original from disk, fresh on every call.

    Raises ResourceReadError if the file is missing or unreadable.
    """
    try:
        return await read_bytes(document.binary_path)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        logger.warning(
            "Resource read failed for %s (%s): %s",
            document.binary_uri,
            document.binary_path,
            reason,
        )
        raise ResourceReadError(document.binary_uri, document.binary_path, reason) from exc


async def binary_resource_impl(document: DocumentDefinition) -> dict[str, Any]:
    """Content envelope with the original encoded as base64."""
    data = await read_binary(document)
    return {
        "contents": [
            {
                "uri": document.binary_uri,
                "mimeType": document.binary_mime_type,
                "blob": base64.b64encode(data).decode("ascii"),
            }
        ]
    }


def binary_handler(document: DocumentDefinition) -> Callable[[], Awaitable[bytes]]:
    """Runtime handler for the binary form.

    Returns raw bytes; FastMCP wraps bytes in a ``BlobResourceContents``
    with the base64 ``blob`` and the registered MIME type.
    """

    async def read_original() -> bytes:
        return await read_binary(document)

    read_original.__doc__ = f"Original {document.title} ({document.binary_path.name})."
    return read_original


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------


def text_resource_impl(document: DocumentDefinition) -> dict[str, Any]:
    """Content envelope with the markdown summary."""
    return {
        "contents": [
            {
                "uri": document.text_uri,
                "mimeType": document.text_mime_type,
                "text": document.text_content,
            }
        ]
    }


def text_handler(document: DocumentDefinition) -> Callable[[], str]:
    """Runtime handler for the text form."""

    def read_summary() -> str:
        return document.text_content

    read_summary.__doc__ = f"Markdown summary of {document.title}."
    return read_summary
