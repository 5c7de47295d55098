from fastapi import APIRouter, Depends, Response, status

from parts_market.domain.seller import User
from parts_market.entrypoints.http.dependencies import (
    get_current_user,
    get_list_all_listings_use_case,
    get_list_sellers_use_case,
    get_remove_seller_use_case,
    get_set_seller_verification_use_case,
)
from parts_market.entrypoints.http.dtos.listings import ListingWithSellerResponseDTO
from parts_market.entrypoints.http.dtos.sellers import (
    SellerVerificationDTO,
    UserResponseDTO,
    UserWithStatsResponseDTO,
)
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.listing_mapper import ListingMapper
from parts_market.entrypoints.http.mappers.seller_mapper import SellerMapper
from parts_market.use_cases.moderate_marketplace import (
    ListAllListings,
    ListSellers,
    RemoveSeller,
    SetSellerVerification,
    SetSellerVerificationRequest,
)


router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/sellers",
    response_model=list[UserWithStatsResponseDTO],
    summary="List sellers with stats",
    responses=error_responses(401, 403),
)
def list_sellers(
    current_user: User = Depends(get_current_user),
    use_case: ListSellers = Depends(get_list_sellers_use_case),
) -> list[UserWithStatsResponseDTO]:
    return [
        SellerMapper.to_user_with_stats_response(seller)
        for seller in use_case.execute(current_user.id)
    ]


@router.patch(
    "/sellers/{seller_id}/verify",
    response_model=UserResponseDTO,
    summary="Set seller verification",
    responses=error_responses(401, 403, 404),
)
def verify_seller(
    seller_id: str,
    payload: SellerVerificationDTO,
    current_user: User = Depends(get_current_user),
    use_case: SetSellerVerification = Depends(get_set_seller_verification_use_case),
) -> UserResponseDTO:
    request = SetSellerVerificationRequest(
        actor_id=current_user.id,
        seller_id=seller_id,
        is_verified=payload.is_verified,
    )
    return SellerMapper.to_user_response(use_case.execute(request))


@router.delete(
    "/sellers/{seller_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove a seller",
    description="Deletes the seller account with all of its parts and ratings.",
    responses=error_responses(401, 403, 404),
)
def remove_seller(
    seller_id: str,
    current_user: User = Depends(get_current_user),
    use_case: RemoveSeller = Depends(get_remove_seller_use_case),
) -> Response:
    use_case.execute(actor_id=current_user.id, seller_id=seller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/parts",
    response_model=list[ListingWithSellerResponseDTO],
    summary="List all parts",
    description="Every part including deactivated ones, newest first.",
    responses=error_responses(401, 403),
)
def list_all_parts(
    current_user: User = Depends(get_current_user),
    use_case: ListAllListings = Depends(get_list_all_listings_use_case),
) -> list[ListingWithSellerResponseDTO]:
    return [
        ListingMapper.to_listing_with_seller_response(item)
        for item in use_case.execute(current_user.id)
    ]
