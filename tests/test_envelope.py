"""
响应结构测试
"""
import pytest
from pydantic import ValidationError

from storefront_admin.client.envelope import (
    ApiError,
    ApiResponse,
    FieldError,
    normalize_failure,
    normalize_success,
)


class TestNormalizeSuccess:
    """成功响应标准化"""

    def test_prefers_data_field(self):
        result = normalize_success({"success": True, "data": {"id": "p1"}, "message": "ok"})

        assert result.ok is True
        assert result.data == {"id": "p1"}
        assert result.message == "ok"

    def test_unwrapped_body_is_payload(self):
        body = {"id": "p1", "name": "Lamp"}
        result = normalize_success(body)

        assert result.ok is True
        assert result.data == body

    def test_empty_data_field_is_kept(self):
        result = normalize_success({"success": True, "data": []})

        assert result.data == []

    def test_list_body(self):
        result = normalize_success(["shoes", "bags"])

        assert result.data == ["shoes", "bags"]
        assert result.message is None


class TestNormalizeFailure:
    """失败响应标准化"""

    def test_message_takes_priority(self):
        result = normalize_failure({"message": "Product not found", "error": "not_found"}, status=404)

        assert result.ok is False
        assert result.message == "Product not found"
        assert result.error_code == "not_found"
        assert result.status == 404
        assert result.data is None

    def test_error_used_when_message_missing(self):
        result = normalize_failure({"error": "Forbidden"})

        assert result.message == "Forbidden"

    def test_generic_message_for_empty_body(self):
        result = normalize_failure({})

        assert result.message == "Request failed"
        assert result.error_code is None
        assert result.field_errors is None

    def test_non_object_body(self):
        result = normalize_failure(["unexpected"])

        assert result.message == "Request failed"

    def test_field_errors(self):
        result = normalize_failure({
            "message": "Validation failed",
            "errors": [
                {"path": ["basePrice"], "message": "Expected number"},
                {"path": ["images", 0], "message": "Invalid url"},
                {"path": ["broken"]},
            ],
        })

        assert [e.path for e in result.field_errors] == [["basePrice"], ["images", "0"]]
        assert result.field_errors[1].message == "Invalid url"


class TestApiResponse:
    """响应结构不变量"""

    def test_failure_requires_message(self):
        with pytest.raises(ValidationError):
            ApiResponse(ok=False)

    def test_failure_cannot_carry_data(self):
        with pytest.raises(ValidationError):
            ApiResponse(ok=False, message="boom", data={"id": 1})

    def test_success_cannot_carry_error_code(self):
        with pytest.raises(ValidationError):
            ApiResponse(ok=True, data={}, error_code="oops")

    def test_raise_for_failure(self):
        assert ApiResponse.success({"id": 1}).raise_for_failure() == {"id": 1}

        failure = ApiResponse.failure(
            "Validation failed",
            error_code="validation_error",
            field_errors=[FieldError(path=["name"], message="Required")],
            status=400
        )
        with pytest.raises(ApiError) as exc_info:
            failure.raise_for_failure()

        assert exc_info.value.status == 400
        assert exc_info.value.error_code == "validation_error"
        assert exc_info.value.field_errors[0].path == ["name"]

    def test_status_not_serialized(self):
        dumped = ApiResponse.success({"id": 1}, status=200).model_dump()

        assert "status" not in dumped
        assert dumped["ok"] is True
