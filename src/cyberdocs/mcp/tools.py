"""MCP retrieval tools: one ``docs.get<Doc>`` tool per document.

A tool answers with the full markdown summary plus pointers to where the
original can be fetched, so a client that never lists resources still
gets everything in one call. Tools take no arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cyberdocs.domain.documents import DocumentDefinition

SEPARATOR = "---"


def compose_document_text(document: DocumentDefinition) -> str:
    """Heading, summary, separator, then the resource pointers.

    The binary URI is always the final line.
    """
    return (
        f"### {document.title} (summary)\n\n"
        f"{document.text_content}\n\n"
        f"{SEPARATOR}\n\n"
        f"Markdown summary resource: {document.text_uri}\n"
        "The original document is available as the following resource:\n"
        f"- {document.binary_uri}\n"
    )


def get_document_impl(document: DocumentDefinition) -> dict[str, Any]:
    """Tool result envelope with a single text block."""
    return {"content": [{"type": "text", "text": compose_document_text(document)}]}


def tool_handler(document: DocumentDefinition) -> Callable[[], str]:
    """Runtime handler for the retrieval tool."""

    def get_document() -> str:
        return compose_document_text(document)

    get_document.__doc__ = document.tool_description
    return get_document
