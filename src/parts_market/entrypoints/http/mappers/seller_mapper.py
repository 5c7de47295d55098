from __future__ import annotations

from decimal import Decimal
from typing import Any

from parts_market.domain.seller import Rating, RatingDraft, User, UserWithStats
from parts_market.entrypoints.http.dtos.ratings import CreateRatingDTO, RatingResponseDTO
from parts_market.entrypoints.http.dtos.sellers import (
    IdentityClaimsDTO,
    UpdateProfileDTO,
    UserResponseDTO,
    UserWithStatsResponseDTO,
)
from parts_market.use_cases.seller_profile import SyncIdentityRequest


_CENTS = Decimal("0.01")


class SellerMapper:
    """Maps between REST DTOs and domain models for users, sellers and ratings."""

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        return UserResponseDTO(**SellerMapper._user_fields(user))

    @staticmethod
    def to_user_with_stats_response(item: UserWithStats) -> UserWithStatsResponseDTO:
        return UserWithStatsResponseDTO(
            **SellerMapper._user_fields(item.user),
            total_listings=item.stats.total_listings,
            average_rating=str(item.stats.average_rating.quantize(_CENTS)),
            total_ratings=item.stats.total_ratings,
        )

    @staticmethod
    def to_profile_changes(dto: UpdateProfileDTO) -> dict[str, Any]:
        return dto.model_dump(exclude_unset=True)

    @staticmethod
    def to_sync_request(dto: IdentityClaimsDTO, user_id: str) -> SyncIdentityRequest:
        return SyncIdentityRequest(
            user_id=user_id,
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            profile_image_url=dto.profile_image_url,
        )

    @staticmethod
    def to_rating_draft(dto: CreateRatingDTO, buyer_id: str) -> RatingDraft:
        return RatingDraft(
            seller_id=dto.seller_id,
            buyer_id=buyer_id,
            rating=dto.rating,
            comment=dto.comment,
        )

    @staticmethod
    def to_rating_response(rating: Rating) -> RatingResponseDTO:
        return RatingResponseDTO(
            id=rating.id,
            seller_id=rating.seller_id,
            buyer_id=rating.buyer_id,
            rating=rating.rating,
            comment=rating.comment,
            created_at=rating.created_at,
        )

    @staticmethod
    def _user_fields(user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "profile_image_url": user.profile_image_url,
            "business_name": user.business_name,
            "seller_type": user.seller_type,
            "location": user.location,
            "phone_number": user.phone_number,
            "whatsapp_number": user.whatsapp_number,
            "is_verified": user.is_verified,
            "is_admin": user.is_admin,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }
