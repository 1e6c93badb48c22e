"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from agecalc.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="calculate_age", data={"years": 24})
        assert result.ok is True
        assert result.op == "calculate_age"
        assert result.data == {"years": 24}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_DATE", message="Invalid birth date (day)")
        result = ServiceResult(ok=False, op="calculate_age", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=False,
            op="validate_date",
            error=ServiceError(
                code="INVALID_DATE",
                message="Invalid birth date (year)",
                detail={"errors": {"year": "Must be in the past"}},
            ),
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["detail"]["errors"] == {"year": "Must be in the past"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="INVALID_MONTH", message="bad")
        assert error.detail == {}


class TestConstructors:
    def test_success(self) -> None:
        result = ServiceResult.success("leap_year", {"year": 2024, "leap": True})
        assert result.ok is True
        assert result.data == {"year": 2024, "leap": True}
        assert result.warnings == []
        assert result.field_errors == {}

    def test_success_with_warnings(self) -> None:
        result = ServiceResult.success("calculate_age", {}, ["later than today"])
        assert result.warnings == ["later than today"]

    def test_failure_with_field_errors(self) -> None:
        errors = {"day": "This field is required", "year": "Must be in the past"}
        result = ServiceResult.failure(
            "calculate_age",
            ErrorCode.INVALID_DATE,
            "Invalid birth date (day, year)",
            field_errors=errors,
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
        assert result.error.detail == {"errors": errors}
        assert result.field_errors == errors

    def test_failure_extra_detail(self) -> None:
        result = ServiceResult.failure(
            "days_in_month", ErrorCode.INVALID_MONTH, "month must be in 1-12, got 13", month=13
        )
        assert result.error is not None
        assert result.error.code == "INVALID_MONTH"
        assert result.error.detail == {"month": 13}
        assert result.field_errors == {}
