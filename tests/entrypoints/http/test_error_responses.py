"""Tests for REST error response models."""

from parts_market.entrypoints.http.error_responses import (
    ErrorDetail,
    ErrorResponse,
    error_responses,
)


class TestErrorDetail:
    def test_creates_error_detail_without_code(self) -> None:
        """ErrorDetail code is optional."""
        detail = ErrorDetail(field="rating", message="Must be between 1 and 5")

        assert detail.model_dump() == {
            "field": "rating",
            "message": "Must be between 1 and 5",
            "code": None,
        }


class TestErrorResponse:
    def test_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Seller not found", code="NOT_FOUND")

        assert response.errors is None

    def test_error_response_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Validation failed",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="vehicle", message="Unknown vehicle", code="INVALID_VEHICLE")],
        )

        data = response.model_dump()
        assert data["errors"][0]["field"] == "vehicle"
        assert data["errors"][0]["code"] == "INVALID_VEHICLE"


class TestErrorResponsesHelper:
    def test_builds_openapi_entries(self) -> None:
        result = error_responses(404, 422)

        assert set(result) == {404, 422}
        assert result[404] == {"model": ErrorResponse, "description": "Resource not found"}
        assert result[422]["description"] == "Validation error"

    def test_unknown_code_gets_generic_description(self) -> None:
        assert error_responses(409)[409]["description"] == "Error"
