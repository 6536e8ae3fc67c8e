"""Unit tests for the response envelope models."""

from typing import Any

import pytest
from pydantic import ValidationError

from recruit_gateway.models.envelope import ApiResponse, ErrorDetail, PageMeta


class TestApiResponse:
    def test_success_response_with_data(self):
        resp = ApiResponse[Any].model_validate({"success": True, "data": {"id": "b-1"}})

        assert resp.success is True
        assert resp.data == {"id": "b-1"}
        assert resp.error is None
        assert resp.errors is None
        assert resp.meta is None

    def test_error_response_with_details(self):
        resp = ApiResponse[Any].model_validate(
            {
                "success": False,
                "error": "Validation failed",
                "errors": [{"code": "VALIDATION_ERROR", "message": "Required", "field": "amount"}],
            }
        )

        assert resp.success is False
        assert resp.errors == [
            ErrorDetail(code="VALIDATION_ERROR", message="Required", field="amount")
        ]

    def test_meta_accepts_camel_case_total_pages(self):
        resp = ApiResponse[Any].model_validate(
            {"success": True, "data": [], "meta": {"page": 2, "limit": 20, "total": 45, "totalPages": 3}}
        )

        assert resp.meta == PageMeta(page=2, limit=20, total=45, total_pages=3)

    def test_extra_keys_are_kept(self):
        resp = ApiResponse[Any].model_validate({"success": True, "token": "tok-1"})
        assert resp.model_extra == {"token": "tok-1"}

    def test_typed_data(self):
        resp = ApiResponse[list[int]].model_validate({"success": True, "data": [1, 2, 3]})
        assert resp.data == [1, 2, 3]

    def test_missing_success_rejected(self):
        with pytest.raises(ValidationError):
            ApiResponse[Any].model_validate({"data": {}})


class TestErrorDetail:
    def test_field_is_optional(self):
        detail = ErrorDetail(code="NOT_FOUND", message="Budget not found")
        assert detail.field is None
