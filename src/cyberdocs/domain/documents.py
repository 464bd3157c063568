"""Document definitions: the unit of server configuration.

A definition pairs a binary original on disk with a markdown summary held
in memory, and derives the stable identifiers both forms are served under.
"""

from __future__ import annotations

import mimetypes
import re
from pathlib import Path

from pydantic import BaseModel

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MARKDOWN_MIME_TYPE = "text/markdown"
URI_SCHEME = "resource"
TOOL_PREFIX = "docs.get"

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


def binary_uri(namespace: str, name: str, suffix: str = ".docx") -> str:
    """``resource://<namespace>/<name><suffix>``."""
    return f"{URI_SCHEME}://{namespace}/{name}{suffix}"


def text_uri(namespace: str, name: str) -> str:
    """``resource://<namespace>/<name>.md``."""
    return f"{URI_SCHEME}://{namespace}/{name}.md"


def tool_name_for(name: str) -> str:
    """Derive the retrieval tool name: ``spec-1`` -> ``docs.getSpec1``."""
    words = [w for w in _WORD_SPLIT.split(name) if w]
    return TOOL_PREFIX + "".join(w[:1].upper() + w[1:] for w in words)


def mime_type_for(path: Path) -> str:
    """Pick the MIME type of a binary original from its file suffix."""
    if path.suffix.lower() == ".docx":
        return DOCX_MIME_TYPE
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def placeholder_text(title: str) -> str:
    """Markdown stand-in for documents that have no summary yet."""
    return f"# {title}\n\nNo markdown summary has been written for this document yet."


class DocumentDefinition(BaseModel):
    """One logical document, immutable once the catalog is built.

    Attributes:
        name: Unique logical identifier (e.g. ``"spec-1"``).
        title: Heading used in tool answers (e.g. ``"API Spec #1"``).
        binary_path: Absolute path of the original on disk.
        binary_uri: Identifier the binary form is addressable under.
        text_uri: Identifier the markdown form is addressable under.
        text_content: Full markdown body, fixed at startup.
        binary_mime_type: MIME type of the original.
        text_mime_type: Always ``text/markdown``.
        tool_name: Name of the retrieval tool.
        tool_description: Human description of the retrieval tool.
    """

    model_config = {"frozen": True}

    name: str
    title: str
    binary_path: Path
    binary_uri: str
    text_uri: str
    text_content: str
    binary_mime_type: str = DOCX_MIME_TYPE
    text_mime_type: str = MARKDOWN_MIME_TYPE
    tool_name: str
    tool_description: str

    @property
    def binary_resource_name(self) -> str:
        """Resource name of the binary form, e.g. ``spec-1-docx``."""
        suffix = self.binary_path.suffix.lstrip(".") or "bin"
        return f"{self.name}-{suffix}"

    @property
    def text_resource_name(self) -> str:
        """Resource name of the markdown form, e.g. ``spec-1-md``."""
        return f"{self.name}-md"

    @classmethod
    def build(
        cls,
        *,
        name: str,
        namespace: str,
        binary_path: Path,
        text_content: str | None = None,
        title: str | None = None,
        tool_name: str | None = None,
        description: str | None = None,
        mime_type: str | None = None,
    ) -> DocumentDefinition:
        """Derive URIs, tool name, and MIME type from the raw table entry."""
        resolved_title = title or name
        if text_content is None:
            text_content = placeholder_text(resolved_title)
        return cls(
            name=name,
            title=resolved_title,
            binary_path=binary_path,
            binary_uri=binary_uri(namespace, name, binary_path.suffix or ".docx"),
            text_uri=text_uri(namespace, name),
            text_content=text_content,
            binary_mime_type=mime_type or mime_type_for(binary_path),
            tool_name=tool_name or tool_name_for(name),
            tool_description=description
            or f"Provides {resolved_title} (markdown summary plus the location of the original).",
        )
