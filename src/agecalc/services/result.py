"""What every AgeService call hands back to the CLI.

A result is either a payload (``ok=True``) or a coded error. Birth date
rejections carry the per-field messages under ``error.detail["errors"]``
so that renderers can list them in day, month, year order.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    INVALID_DATE = "INVALID_DATE"
    INVALID_MONTH = "INVALID_MONTH"


class ServiceError(BaseModel):
    """Why an operation failed: a code, a one-line message, and extra detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one AgeService operation.

    ``op`` names the operation (``calculate_age``, ``validate_date``,
    ``check_day``, ``leap_year``, ``days_in_month``) and selects the
    renderer. ``meta`` holds the telemetry tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        field_errors: dict[str, str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Failed result; *field_errors* land in ``error.detail["errors"]``."""
        if field_errors is not None:
            detail["errors"] = dict(field_errors)
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code.value, message=message, detail=detail),
        )

    @property
    def field_errors(self) -> dict[str, str]:
        """Per-field messages of a rejected birth date, empty otherwise."""
        if self.error is None:
            return {}
        return dict(self.error.detail.get("errors") or {})
