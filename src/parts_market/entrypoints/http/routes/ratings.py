from fastapi import APIRouter, Depends, status

from parts_market.domain.seller import User
from parts_market.entrypoints.http.dependencies import get_current_user, get_rate_seller_use_case
from parts_market.entrypoints.http.dtos.ratings import CreateRatingDTO, RatingResponseDTO
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.seller_mapper import SellerMapper
from parts_market.use_cases.rate_seller import RateSeller, RateSellerRequest


router = APIRouter(tags=["Ratings"])


@router.post(
    "/ratings",
    response_model=RatingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Rate a seller",
    description="The caller rates a seller from 1 to 5 stars. Repeat ratings are accepted.",
    responses=error_responses(401, 404, 422),
)
def create_rating(
    payload: CreateRatingDTO,
    current_user: User = Depends(get_current_user),
    use_case: RateSeller = Depends(get_rate_seller_use_case),
) -> RatingResponseDTO:
    draft = SellerMapper.to_rating_draft(payload, buyer_id=current_user.id)

    rating = use_case.execute(RateSellerRequest(draft=draft))

    return SellerMapper.to_rating_response(rating)
