"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cyberdocs.toml only contains
overrides. With no config file at all the server publishes the two
built-in API specs.
"""

from __future__ import annotations

from pydantic import BaseModel


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    name: str = "cyber-mcp-docs"
    namespace: str = "cyber"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class DocumentConfig(BaseModel):
    """One ``[[documents]]`` table entry.

    ``path`` and ``text_path`` are resolved against the docs root.
    Without ``text_path`` the packaged markdown for *name* is used, and
    without that a placeholder.
    """

    model_config = {"frozen": True}

    name: str
    title: str | None = None
    path: str | None = None
    text_path: str | None = None
    tool_name: str | None = None
    description: str | None = None
    mime_type: str | None = None


def default_documents() -> list[DocumentConfig]:
    """The built-in document table."""
    return [
        DocumentConfig(
            name="spec-1",
            title="API Spec #1",
            description="Provides API Spec #1 (markdown summary plus the docx location).",
        ),
        DocumentConfig(
            name="spec-2",
            title="API Spec #2",
            description="Provides API Spec #2 (markdown summary plus the docx location).",
        ),
    ]

