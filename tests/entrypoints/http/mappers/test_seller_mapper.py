from __future__ import annotations

from decimal import Decimal

from parts_market.domain.seller import SellerStats, User, UserWithStats
from parts_market.entrypoints.http.dtos.sellers import IdentityClaimsDTO, UpdateProfileDTO
from parts_market.entrypoints.http.mappers.seller_mapper import SellerMapper


def test_average_rating_is_two_place_string() -> None:
    item = UserWithStats(user=User(id="s1"), stats=SellerStats())

    dto = SellerMapper.to_user_with_stats_response(item)

    assert dto.average_rating == "0.00"
    assert dto.total_listings == 0


def test_average_rating_keeps_rounded_value() -> None:
    item = UserWithStats(
        user=User(id="s1"),
        stats=SellerStats(total_listings=3, average_rating=Decimal("4.13"), total_ratings=8),
    )

    assert SellerMapper.to_user_with_stats_response(item).average_rating == "4.13"


def test_profile_changes_exclude_unset() -> None:
    dto = UpdateProfileDTO.model_validate({"location": "Karen, Nairobi", "phone_number": None})

    assert SellerMapper.to_profile_changes(dto) == {
        "location": "Karen, Nairobi",
        "phone_number": None,
    }


def test_sync_request_uses_header_identity() -> None:
    dto = IdentityClaimsDTO(email="a@example.com", first_name="Amina")

    request = SellerMapper.to_sync_request(dto, user_id="u-42")

    assert request.user_id == "u-42"
    assert request.email == "a@example.com"
    assert request.last_name is None
