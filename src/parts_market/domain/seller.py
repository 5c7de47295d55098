from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from parts_market.domain.errors import ValidationError
from parts_market.domain.listing import SELLER_TYPES, Listing

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True, slots=True)
class User:
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    business_name: str | None = None
    seller_type: str | None = None
    location: str | None = None  # "Area, City"
    phone_number: str | None = None
    whatsapp_number: str | None = None
    is_verified: bool = False
    is_admin: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_seller(self) -> bool:
        return self.seller_type is not None


@dataclass(frozen=True, slots=True)
class SellerStats:
    total_listings: int = 0
    average_rating: Decimal = Decimal("0")
    total_ratings: int = 0


@dataclass(frozen=True, slots=True)
class UserWithStats:
    user: User
    stats: SellerStats


@dataclass(frozen=True, slots=True)
class Rating:
    id: str
    seller_id: str
    buyer_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class RatingDraft:
    seller_id: str
    buyer_id: str
    rating: int
    comment: str | None = None

    def validate(self) -> None:
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                errors=[
                    {
                        "field": "rating",
                        "message": f"Must be between {MIN_RATING} and {MAX_RATING}",
                        "code": "INVALID_RANGE",
                    }
                ]
            )


# Fields a user may change on their own profile
PROFILE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "profile_image_url",
        "business_name",
        "seller_type",
        "location",
        "phone_number",
        "whatsapp_number",
    }
)


def validate_profile_changes(changes: dict[str, object]) -> None:
    """
    Raises:
        ValidationError: On unknown fields or an unsupported seller_type
    """
    errors: list[dict[str, str]] = []

    for name in sorted(set(changes) - PROFILE_FIELDS):
        errors.append({"field": name, "message": "Field cannot be changed", "code": "READ_ONLY"})

    seller_type = changes.get("seller_type")
    if seller_type is not None and seller_type not in SELLER_TYPES:
        errors.append(
            {
                "field": "seller_type",
                "message": f"Must be one of {sorted(SELLER_TYPES)}",
                "code": "INVALID_CHOICE",
            }
        )

    if errors:
        raise ValidationError(errors=errors)


def compute_seller_stats(listings: Iterable[Listing], ratings: Iterable[Rating]) -> SellerStats:
    """
    Aggregate stats for one seller.

    Counts active listings only; the average is rounded to two places and is
    0 when the seller has no ratings.
    """
    total_listings = sum(1 for listing in listings if listing.is_active)
    values = [rating.rating for rating in ratings]

    if not values:
        return SellerStats(total_listings=total_listings)

    average = (Decimal(sum(values)) / Decimal(len(values))).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
    return SellerStats(
        total_listings=total_listings,
        average_rating=average,
        total_ratings=len(values),
    )
