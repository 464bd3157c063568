"""Result envelope returned by every catalog operation.

INVARIANT: Service methods never raise for expected failures (unknown
document, unreadable original); they return a failed ServiceResult whose
error code the CLI maps to exit status 1.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    UNKNOWN_DOCUMENT = "UNKNOWN_DOCUMENT"
    RESOURCE_READ_ERROR = "RESOURCE_READ_ERROR"


class ServiceError(BaseModel):
    """Machine-readable failure: a stable code plus context."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one catalog operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, also used to pick a renderer (``"list"``).
        data: Operation payload.
        warnings: Non-fatal issues worth showing on stderr.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail),
        )
