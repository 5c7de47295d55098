from fastapi import APIRouter, Depends

from parts_market.entrypoints.http.dependencies import (
    get_seller_listings_use_case,
    get_seller_profile_use_case,
    get_seller_ratings_use_case,
)
from parts_market.entrypoints.http.dtos.listings import ListingResponseDTO
from parts_market.entrypoints.http.dtos.ratings import RatingResponseDTO
from parts_market.entrypoints.http.dtos.sellers import UserWithStatsResponseDTO
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.listing_mapper import ListingMapper
from parts_market.entrypoints.http.mappers.seller_mapper import SellerMapper
from parts_market.use_cases.rate_seller import ListSellerRatings
from parts_market.use_cases.seller_profile import GetSellerProfile, ListSellerListings


router = APIRouter(tags=["Sellers"])


@router.get(
    "/sellers/{seller_id}",
    response_model=UserWithStatsResponseDTO,
    summary="Get seller profile",
    description="Seller with listing and rating stats computed at request time.",
    responses=error_responses(404),
)
def get_seller(
    seller_id: str,
    use_case: GetSellerProfile = Depends(get_seller_profile_use_case),
) -> UserWithStatsResponseDTO:
    seller = use_case.execute(seller_id)
    return SellerMapper.to_user_with_stats_response(seller)


@router.get(
    "/sellers/{seller_id}/parts",
    response_model=list[ListingResponseDTO],
    summary="List a seller's active parts",
)
def get_seller_parts(
    seller_id: str,
    use_case: ListSellerListings = Depends(get_seller_listings_use_case),
) -> list[ListingResponseDTO]:
    return [ListingMapper.to_listing_response(listing) for listing in use_case.execute(seller_id)]


@router.get(
    "/sellers/{seller_id}/ratings",
    response_model=list[RatingResponseDTO],
    summary="List ratings received by a seller",
)
def get_seller_ratings(
    seller_id: str,
    use_case: ListSellerRatings = Depends(get_seller_ratings_use_case),
) -> list[RatingResponseDTO]:
    return [SellerMapper.to_rating_response(rating) for rating in use_case.execute(seller_id)]
