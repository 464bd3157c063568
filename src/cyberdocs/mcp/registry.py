"""Registry builder. Three handlers per document, registered once.

``plan_registrations`` turns the document table into an ordered list of
:class:`Registration` records and rejects colliding identifiers before
anything reaches the runtime. ``register_documents`` hands the plan to
FastMCP. Neither performs I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from cyberdocs.domain.documents import DocumentDefinition
from cyberdocs.domain.errors import ConfigurationError
from cyberdocs.mcp.resources import binary_handler, text_handler
from cyberdocs.mcp.tools import tool_handler

logger = logging.getLogger(__name__)


class RegistrationKind(StrEnum):
    BINARY_RESOURCE = "binary-resource"
    TEXT_RESOURCE = "text-resource"
    TOOL = "tool"


@dataclass(frozen=True)
class Registration:
    """A (key, handler) pair destined for the runtime's dispatch table.

    *key* is the resource URI or tool name; *name* is the resource name
    shown to clients (for tools it equals the key).
    """

    kind: RegistrationKind
    key: str
    name: str
    document: str
    description: str
    handler: Callable[[], Any]
    mime_type: str | None = None

    @property
    def is_resource(self) -> bool:
        return self.kind is not RegistrationKind.TOOL


def registrations_for(document: DocumentDefinition) -> list[Registration]:
    """The binary resource, text resource, and tool for one document."""
    return [
        Registration(
            kind=RegistrationKind.BINARY_RESOURCE,
            key=document.binary_uri,
            name=document.binary_resource_name,
            document=document.name,
            description=f"{document.title} original ({document.binary_path.name})",
            handler=binary_handler(document),
            mime_type=document.binary_mime_type,
        ),
        Registration(
            kind=RegistrationKind.TEXT_RESOURCE,
            key=document.text_uri,
            name=document.text_resource_name,
            document=document.name,
            description=f"{document.title} markdown summary",
            handler=text_handler(document),
            mime_type=document.text_mime_type,
        ),
        Registration(
            kind=RegistrationKind.TOOL,
            key=document.tool_name,
            name=document.tool_name,
            document=document.name,
            description=document.tool_description,
            handler=tool_handler(document),
        ),
    ]


def find_collisions(documents: Sequence[DocumentDefinition]) -> list[str]:
    """Describe every duplicated name, URI, resource name, or tool name."""
    collisions: list[str] = []

    seen_names: set[str] = set()
    for doc in documents:
        if doc.name in seen_names:
            collisions.append(f"document name {doc.name!r} is defined more than once")
        seen_names.add(doc.name)

    owners: dict[tuple[str, str], str] = {}
    for doc in documents:
        for reg in registrations_for(doc):
            if reg.is_resource:
                keys = [("uri", reg.key), ("resource name", reg.name)]
            else:
                keys = [("tool name", reg.key)]
            for label, value in keys:
                if (label, value) in owners:
                    owner = owners[(label, value)]
                    collisions.append(f"{label} {value!r} used by both {owner!r} and {doc.name!r}")
                else:
                    owners[(label, value)] = doc.name
    return collisions


def plan_registrations(documents: Iterable[DocumentDefinition]) -> list[Registration]:
    """Build the full registration list, three entries per document.

    Raises ConfigurationError if any identifier collides.
    """
    docs = list(documents)
    collisions = find_collisions(docs)
    if collisions:
        msg = "Conflicting document definitions: " + "; ".join(collisions)
        raise ConfigurationError(msg, collisions=collisions)
    return [reg for doc in docs for reg in registrations_for(doc)]


def register_documents(server: Any, documents: Iterable[DocumentDefinition]) -> list[Registration]:
    """Register every document's resources and tool on the FastMCP server.

    The plan is validated in full before the first handler is registered.
    Returns the registrations in the order they were installed.
    """
    plan = plan_registrations(documents)
    for reg in plan:
        if reg.is_resource:
            server.resource(
                reg.key,
                name=reg.name,
                description=reg.description,
                mime_type=reg.mime_type,
            )(reg.handler)
        else:
            server.tool(
                name=reg.key,
                description=reg.description,
                structured_output=False,
            )(reg.handler)
        logger.debug("Registered %s %s", reg.kind.value, reg.key)
    return plan
