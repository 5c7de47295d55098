"""REST API error response models.

Every error body shares this shape; routes reference ErrorResponse in their
documented responses.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "max_price",
                "message": "String should match pattern '^\\d+(\\.\\d{1,2})?$'",
                "code": "string_pattern_mismatch",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Part with identifier '42' not found", "code": "NOT_FOUND"}

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "rating", "message": "Must be between 1 and 5", "code": "INVALID_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Seller not found", "code": "NOT_FOUND"},
                {"detail": "Admin access required", "code": "FORBIDDEN"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "vehicle",
                            "message": "Unknown vehicle: 2021 Honda Fit (Cars & Trucks)",
                            "code": "INVALID_VEHICLE",
                        }
                    ],
                },
            ]
        }
    )


def error_responses(*status_codes: int) -> dict[int | str, dict[str, object]]:
    """OpenAPI ``responses`` entries documenting ErrorResponse bodies."""
    descriptions = {
        401: "Missing or unknown X-User-Id",
        403: "Not allowed",
        404: "Resource not found",
        422: "Validation error",
    }
    return {
        code: {"model": ErrorResponse, "description": descriptions.get(code, "Error")}
        for code in status_codes
    }
