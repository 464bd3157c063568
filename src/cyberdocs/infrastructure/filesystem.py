"""Filesystem access for document originals and summaries.

INVARIANT: Originals are never cached. Every read goes back to disk, so
a restored or replaced file is served on the next request.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import anyio

logger = logging.getLogger(__name__)

# Packaged markdown summaries live in ``cyberdocs/texts/<name>.md``.
_TEXTS_PACKAGE = "cyberdocs"
_TEXTS_DIR = "texts"

DEFAULT_ORIGINALS_DIR = "spec"


def resolve_path(docs_root: Path, raw: str | None, default: str) -> Path:
    """Resolve *raw* (or *default*) against *docs_root* unless absolute."""
    path = Path(raw or default).expanduser()
    if not path.is_absolute():
        path = docs_root / path
    return path.resolve()


def default_binary_location(docs_root: Path, name: str) -> Path:
    """``<docs_root>/spec/<name>.docx``."""
    return resolve_path(docs_root, None, f"{DEFAULT_ORIGINALS_DIR}/{name}.docx")


def packaged_text(name: str) -> str | None:
    """Return the packaged markdown summary for *name*, or None."""
    resource = resources.files(_TEXTS_PACKAGE).joinpath(_TEXTS_DIR, f"{name}.md")
    if not resource.is_file():
        return None
    return resource.read_text(encoding="utf-8")


async def read_bytes(path: Path) -> bytes:
    """Read *path* in full without blocking the event loop."""
    data = await anyio.Path(path).read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return data
