from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable

from parts_market.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when listing filter parameters are invalid."""

    pass


class ListingValidationError(ValidationError):
    """Raised when listing fields break a listing invariant."""

    pass


CONDITIONS = {"new", "used"}
SELLER_TYPES = {"private", "business"}
MAX_IMAGES = 3


@dataclass(frozen=True, slots=True)
class SellerSummary:
    """Seller fields shown next to a listing."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    business_name: str | None = None
    seller_type: str | None = None
    location: str | None = None
    is_verified: bool = False


@dataclass(frozen=True, slots=True)
class Listing:
    id: str
    seller_id: str
    name: str
    condition: str
    description: str | None = None
    vehicle_type: str | None = None
    year: int | None = None
    make: str | None = None
    model: str | None = None
    car_model: str | None = None
    price: Decimal | None = None
    images: tuple[str, ...] = ()
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class ListingWithSeller:
    listing: Listing
    seller: SellerSummary


@dataclass(frozen=True, slots=True)
class ListingDraft:
    """Fields a seller supplies when publishing a listing."""

    seller_id: str
    name: str
    condition: str
    description: str | None = None
    vehicle_type: str | None = None
    year: int | None = None
    make: str | None = None
    model: str | None = None
    car_model: str | None = None
    price: Decimal | None = None
    images: tuple[str, ...] = field(default_factory=tuple)


def listing_field_errors(
    name: str,
    condition: str,
    price: Decimal | None,
    images: tuple[str, ...],
) -> list[dict[str, str]]:
    """Field-level errors shared by listing creation and update."""
    errors: list[dict[str, str]] = []

    if not name or not name.strip():
        errors.append({"field": "name", "message": "Must not be empty", "code": "REQUIRED"})
    if condition not in CONDITIONS:
        errors.append(
            {
                "field": "condition",
                "message": f"Must be one of {sorted(CONDITIONS)}",
                "code": "INVALID_CHOICE",
            }
        )
    if price is not None and price < 0:
        errors.append({"field": "price", "message": "Must be >= 0", "code": "INVALID_RANGE"})
    if len(images) > MAX_IMAGES:
        errors.append(
            {
                "field": "images",
                "message": f"At most {MAX_IMAGES} images are allowed",
                "code": "TOO_MANY_IMAGES",
            }
        )

    return errors


# ==============================================================================
# Filter Pipeline
# ==============================================================================


ListingPredicate = Callable[[ListingWithSeller], bool]


@dataclass(frozen=True, slots=True)
class ListingFilters:
    search: str | None = None
    car_model: str | None = None
    condition: str | None = None
    location: str | None = None
    seller_type: str | None = None
    max_price: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.max_price is not None and not isinstance(self.max_price, Decimal):
            raise FilterValidationError(
                "max_price must be Decimal or None (no floats past the boundary)"
            )
        if self.max_price is not None and (
            not self.max_price.is_finite() or self.max_price < 0
        ):
            raise FilterValidationError("max_price must be a non-negative number")
        if self.condition is not None and self.condition not in CONDITIONS:
            raise FilterValidationError(f"condition must be one of {sorted(CONDITIONS)}")
        if self.seller_type is not None and self.seller_type not in SELLER_TYPES:
            raise FilterValidationError(f"seller_type must be one of {sorted(SELLER_TYPES)}")


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


def build_listing_predicate(filters: ListingFilters) -> ListingPredicate:
    """
    Combine filter criteria into a single AND predicate.

    Inactive listings never match. A criterion that is None (or an empty
    string) adds no constraint.
    """
    clauses: list[ListingPredicate] = [lambda item: item.listing.is_active]

    if filters.search:
        search = filters.search
        clauses.append(
            lambda item: _contains(item.listing.name, search)
            or _contains(item.listing.car_model, search)
        )
    if filters.car_model:
        car_model = filters.car_model
        clauses.append(lambda item: _contains(item.listing.car_model, car_model))
    if filters.condition:
        condition = filters.condition
        clauses.append(lambda item: item.listing.condition == condition)
    if filters.location:
        location = filters.location
        clauses.append(lambda item: _contains(item.seller.location, location))
    if filters.seller_type:
        seller_type = filters.seller_type
        clauses.append(lambda item: item.seller.seller_type == seller_type)
    if filters.max_price is not None:
        max_price = filters.max_price
        clauses.append(
            lambda item: item.listing.price is not None and item.listing.price <= max_price
        )

    return lambda item: all(clause(item) for clause in clauses)


def sort_by_recency(items: Iterable[ListingWithSeller]) -> list[ListingWithSeller]:
    """Most recently created first; listings without a timestamp go last."""
    return sorted(
        items,
        key=lambda item: (
            item.listing.created_at is not None,
            item.listing.created_at or datetime.min,
        ),
        reverse=True,
    )
