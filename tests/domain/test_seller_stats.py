"""Tests for seller aggregates, ratings and profile rules."""

from __future__ import annotations

from decimal import Decimal

import pytest

from parts_market.domain.errors import ValidationError
from parts_market.domain.listing import Listing
from parts_market.domain.seller import (
    Rating,
    RatingDraft,
    SellerStats,
    User,
    compute_seller_stats,
    validate_profile_changes,
)


def listing(listing_id: str, is_active: bool = True) -> Listing:
    return Listing(id=listing_id, seller_id="s1", name="Part", condition="used", is_active=is_active)


def rating(value: int) -> Rating:
    return Rating(id=f"r{value}", seller_id="s1", buyer_id="b1", rating=value)


# ==============================================================================
# compute_seller_stats
# ==============================================================================


def test_stats_without_listings_or_ratings() -> None:
    assert compute_seller_stats([], []) == SellerStats(
        total_listings=0, average_rating=Decimal("0"), total_ratings=0
    )


def test_stats_count_active_listings_only() -> None:
    stats = compute_seller_stats([listing("1"), listing("2"), listing("3", is_active=False)], [])

    assert stats.total_listings == 2


def test_stats_average_rounds_half_up_to_cents() -> None:
    """(5 + 4 + 4) / 3 = 4.333..."""
    stats = compute_seller_stats([], [rating(5), rating(4), rating(4)])

    assert stats.average_rating == Decimal("4.33")
    assert stats.total_ratings == 3


def test_stats_average_half_rounds_up() -> None:
    """(5 + 4 + 4 + 4 + 4 + 4 + 4 + 4) / 8 = 4.125"""
    stats = compute_seller_stats([], [rating(5)] + [rating(4)] * 7)

    assert stats.average_rating == Decimal("4.13")


def test_stats_duplicate_ratings_all_count() -> None:
    stats = compute_seller_stats([], [rating(1), rating(1), rating(4)])

    assert stats.total_ratings == 3
    assert stats.average_rating == Decimal("2.00")


# ==============================================================================
# RatingDraft
# ==============================================================================


@pytest.mark.parametrize("value", [1, 3, 5])
def test_rating_draft_accepts_one_to_five(value: int) -> None:
    RatingDraft(seller_id="s1", buyer_id="b1", rating=value).validate()


@pytest.mark.parametrize("value", [0, 6, -1])
def test_rating_draft_rejects_out_of_range(value: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        RatingDraft(seller_id="s1", buyer_id="b1", rating=value).validate()

    assert exc_info.value.errors == [
        {"field": "rating", "message": "Must be between 1 and 5", "code": "INVALID_RANGE"}
    ]


# ==============================================================================
# Profile
# ==============================================================================


def test_user_is_seller_once_seller_type_set() -> None:
    assert not User(id="u1").is_seller
    assert User(id="u1", seller_type="business").is_seller


def test_profile_changes_accept_known_fields() -> None:
    validate_profile_changes({"seller_type": "private", "location": "Kilimani, Nairobi"})


def test_profile_changes_reject_flags() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_profile_changes({"is_admin": True, "is_verified": True})

    assert [error["field"] for error in exc_info.value.errors or []] == [
        "is_admin",
        "is_verified",
    ]
    assert all(error["code"] == "READ_ONLY" for error in exc_info.value.errors or [])


def test_profile_changes_reject_unknown_seller_type() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_profile_changes({"seller_type": "dealer"})

    assert exc_info.value.errors[0]["code"] == "INVALID_CHOICE"  # type: ignore[index]
