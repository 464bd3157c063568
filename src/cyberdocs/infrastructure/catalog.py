"""The immutable document table, built once per process.

Turns the ``[[documents]]`` configuration into
:class:`~cyberdocs.domain.documents.DocumentDefinition` objects, loading
every markdown summary into memory up front. Binary originals are *not*
touched here; they are read per request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from cyberdocs.domain.documents import DocumentDefinition
from cyberdocs.domain.errors import ConfigurationError
from cyberdocs.infrastructure.filesystem import (
    default_binary_location,
    packaged_text,
    resolve_path,
)

if TYPE_CHECKING:
    from cyberdocs.config.models import DocumentConfig
    from cyberdocs.config.settings import DocsSettings

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered, read-only collection of document definitions."""

    def __init__(self, documents: tuple[DocumentDefinition, ...]) -> None:
        self._documents = documents
        self._by_name = {doc.name: doc for doc in documents}

    @classmethod
    def from_settings(cls, settings: DocsSettings) -> Catalog:
        """Build the catalog from resolved settings.

        Raises ConfigurationError if a configured ``text_path`` cannot be
        read. Identifier collisions are detected by the registry, not here.
        """
        namespace = settings.server.namespace
        documents = tuple(
            _build_definition(entry, settings, namespace) for entry in settings.documents
        )
        logger.debug("Catalog built with %d documents", len(documents))
        return cls(documents)

    @property
    def documents(self) -> tuple[DocumentDefinition, ...]:
        return self._documents

    def get(self, name: str) -> DocumentDefinition | None:
        return self._by_name.get(name)

    def __iter__(self) -> Iterator[DocumentDefinition]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)


def _build_definition(
    entry: DocumentConfig, settings: DocsSettings, namespace: str
) -> DocumentDefinition:
    root = settings.docs_root
    if entry.path:
        binary_path = resolve_path(root, entry.path, entry.path)
    else:
        binary_path = default_binary_location(root, entry.name)

    if entry.text_path:
        text_file = resolve_path(root, entry.text_path, entry.text_path)
        try:
            text_content: str | None = text_file.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read markdown for {entry.name!r} from {text_file}: {exc}"
            raise ConfigurationError(msg) from exc
    else:
        text_content = packaged_text(entry.name)
        if text_content is None:
            logger.warning("No markdown summary for %s; serving a placeholder", entry.name)

    return DocumentDefinition.build(
        name=entry.name,
        namespace=namespace,
        binary_path=binary_path,
        text_content=text_content,
        title=entry.title,
        tool_name=entry.tool_name,
        description=entry.description,
        mime_type=entry.mime_type,
    )
