"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
Accessibility findings (failing pairs, low scores) are data on a
successful result; ``ok=False`` is reserved for unusable input.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable error codes carried in ServiceError.code."""

    INVALID_COLOR = "INVALID_COLOR"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    INVALID_WEIGHTS = "INVALID_WEIGHTS"
    INVALID_OPTIONS = "INVALID_OPTIONS"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the input was usable and the operation ran.
        op: Name of the operation (e.g. ``"score"``).
        data: Operation-specific payload on success.
        warnings: Human-readable findings worth surfacing on stderr.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (option values used, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
