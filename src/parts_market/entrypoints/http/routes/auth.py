from fastapi import APIRouter, Depends, Header

from parts_market.domain.errors import UnauthorizedError
from parts_market.domain.seller import User
from parts_market.entrypoints.http.dependencies import (
    get_current_user,
    get_seller_profile_use_case,
    get_sync_identity_use_case,
    get_update_profile_use_case,
)
from parts_market.entrypoints.http.dtos.sellers import (
    IdentityClaimsDTO,
    UpdateProfileDTO,
    UserResponseDTO,
    UserWithStatsResponseDTO,
)
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.seller_mapper import SellerMapper
from parts_market.use_cases.seller_profile import (
    GetSellerProfile,
    SyncIdentity,
    UpdateProfile,
    UpdateProfileRequest,
)


router = APIRouter(tags=["Account"])


@router.put(
    "/auth/user",
    response_model=UserResponseDTO,
    summary="Sync the signed-in identity",
    description="Called by the auth proxy after sign-in. Creates the user on first sign-in.",
    responses=error_responses(401, 422),
)
def sync_me(
    payload: IdentityClaimsDTO,
    x_user_id: str | None = Header(default=None),
    use_case: SyncIdentity = Depends(get_sync_identity_use_case),
) -> UserResponseDTO:
    if not x_user_id:
        raise UnauthorizedError("Authentication required")

    user = use_case.execute(SellerMapper.to_sync_request(payload, user_id=x_user_id))
    return SellerMapper.to_user_response(user)


@router.get(
    "/auth/user",
    response_model=UserWithStatsResponseDTO,
    summary="Get the current user",
    responses=error_responses(401),
)
def get_me(
    current_user: User = Depends(get_current_user),
    use_case: GetSellerProfile = Depends(get_seller_profile_use_case),
) -> UserWithStatsResponseDTO:
    return SellerMapper.to_user_with_stats_response(use_case.execute(current_user.id))


@router.patch(
    "/auth/user",
    response_model=UserResponseDTO,
    summary="Update the current user's profile",
    description="Set seller_type to become a seller. Verification and admin flags are not editable here.",
    responses=error_responses(401, 422),
)
def update_me(
    payload: UpdateProfileDTO,
    current_user: User = Depends(get_current_user),
    use_case: UpdateProfile = Depends(get_update_profile_use_case),
) -> UserResponseDTO:
    request = UpdateProfileRequest(
        user_id=current_user.id,
        changes=SellerMapper.to_profile_changes(payload),
    )
    return SellerMapper.to_user_response(use_case.execute(request))
