"""Tests for domain error classes."""

from parts_market.domain.errors import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from parts_market.domain.listing import FilterValidationError, ListingValidationError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_includes_context(self) -> None:
        """DomainError.to_dict() flattens context next to message and code."""
        error = DomainError("Test error", resource="Part", action="create")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "resource": "Part",
            "action": "create",
        }

    def test_str_representation(self) -> None:
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_default_message_without_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.error_code == "VALIDATION_ERROR"

    def test_field_errors_set_default_message(self) -> None:
        """ValidationError with field errors reports 'Validation failed'."""
        errors = [{"field": "rating", "message": "Must be between 1 and 5", "code": "INVALID_RANGE"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_to_dict_includes_errors(self) -> None:
        errors = [{"field": "name", "message": "Must not be empty", "code": "REQUIRED"}]

        result = ValidationError(errors=errors).to_dict()

        assert result == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_errors_omits_key(self) -> None:
        result = ValidationError("max_price must be a non-negative number").to_dict()

        assert "errors" not in result
        assert result["message"] == "max_price must be a non-negative number"

    def test_listing_errors_are_validation_errors(self) -> None:
        """Listing-specific errors share the VALIDATION_ERROR code."""
        assert isinstance(FilterValidationError("bad"), ValidationError)
        assert ListingValidationError(errors=[{"field": "x", "message": "y"}]).error_code == (
            "VALIDATION_ERROR"
        )


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Part", "42")

        assert error.message == "Part with identifier '42' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Part", "identifier": "42"}

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("Seller")

        assert error.message == "Seller not found"
        assert error.context["identifier"] is None


class TestOtherErrors:
    """Error codes of the remaining error classes."""

    def test_error_codes(self) -> None:
        assert ConflictError("x").error_code == "CONFLICT"
        assert UnauthorizedError("x").error_code == "UNAUTHORIZED"
        assert ForbiddenError("x").error_code == "FORBIDDEN"
        assert InternalError("x").error_code == "INTERNAL_ERROR"

    def test_all_inherit_from_domain_error(self) -> None:
        for error_class in (
            ValidationError,
            ConflictError,
            UnauthorizedError,
            ForbiddenError,
            InternalError,
        ):
            assert issubclass(error_class, DomainError)
        assert issubclass(NotFoundError, DomainError)
