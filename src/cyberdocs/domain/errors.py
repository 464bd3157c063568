"""Exception types shared by the registry, producers, and CLI."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """The document table cannot be served as configured.

    Raised at startup, before any handler is registered.
    """

    def __init__(self, message: str, *, collisions: list[str] | None = None) -> None:
        super().__init__(message)
        self.collisions = collisions or []


class ResourceReadError(Exception):
    """A binary original could not be read at request time.

    The message carries the URI and reason only; *path* is kept on the
    instance for logs and service error detail.
    """

    def __init__(self, uri: str, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {uri}: {reason}")
        self.uri = uri
        self.path = path
        self.reason = reason
