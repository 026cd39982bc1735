"""ServiceResult and ServiceError — the value every operation returns.

INVARIANT: Graph and traversal operations never raise for expected
failures (duplicate or unknown pages, malformed commands). They return
a ServiceResult with ``ok=False`` and a coded ServiceError instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from weblinker.domain.types import ErrorCode


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_page"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult for *op*."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
