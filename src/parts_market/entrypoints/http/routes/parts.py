from fastapi import APIRouter, Depends, Response, status

from parts_market.domain.seller import User
from parts_market.entrypoints.http.dependencies import (
    get_create_listing_use_case,
    get_current_user,
    get_delete_listing_use_case,
    get_get_listing_by_id_use_case,
    get_search_listings_use_case,
    get_update_listing_use_case,
)
from parts_market.entrypoints.http.dtos.listings import (
    CreateListingDTO,
    ListingResponseDTO,
    ListingsSearchQueryDTO,
    ListingsSearchResponseDTO,
    ListingWithSellerResponseDTO,
    UpdateListingDTO,
)
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.listing_mapper import ListingMapper
from parts_market.use_cases.get_listing_by_id import GetListingById, GetListingByIdRequest
from parts_market.use_cases.manage_listing import (
    CreateListing,
    CreateListingRequest,
    DeleteListing,
    DeleteListingRequest,
    UpdateListing,
    UpdateListingRequest,
)
from parts_market.use_cases.search_listings import SearchListings


router = APIRouter(tags=["Parts"])


@router.get(
    "/parts",
    response_model=ListingsSearchResponseDTO,
    summary="Search parts",
    description="""
    Search active part listings.

    ## Filters
    - All filters use AND semantics; omitted filters add no constraint
    - search: substring of the part name or car model (case-insensitive)
    - car_model, location: case-insensitive substring
    - condition, seller_type: exact match
    - max_price: inclusive; parts without a price are excluded

    Results are ordered newest first.

    ## Example
    ```
    GET /v1/parts?search=brake&max_price=200.00
    ```
    """,
    responses=error_responses(422),
)
def search_parts(
    query: ListingsSearchQueryDTO = Depends(),
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ListingsSearchResponseDTO:
    """Search parts endpoint following parse → execute → map → return pattern."""
    request = ListingMapper.to_search_request(query)

    result = use_case.execute(request)

    return ListingMapper.to_search_response(result)


@router.get(
    "/parts/{part_id}",
    response_model=ListingWithSellerResponseDTO,
    summary="Get part by ID",
    responses=error_responses(404),
)
def get_part(
    part_id: str,
    use_case: GetListingById = Depends(get_get_listing_by_id_use_case),
) -> ListingWithSellerResponseDTO:
    result = use_case.execute(GetListingByIdRequest(listing_id=part_id))
    return ListingMapper.to_listing_with_seller_response(result.listing)


@router.post(
    "/parts",
    response_model=ListingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a part",
    description="""
    Publish a listing owned by the caller.

    Vehicle attributes (vehicle_type, year, make, model) are optional as a
    group; when given they must form a selection offered by
    `/v1/vehicles/options`. At most 3 image URLs.
    """,
    responses=error_responses(401, 422),
)
def create_part(
    payload: CreateListingDTO,
    current_user: User = Depends(get_current_user),
    use_case: CreateListing = Depends(get_create_listing_use_case),
) -> ListingResponseDTO:
    draft = ListingMapper.to_draft(payload, seller_id=current_user.id)

    listing = use_case.execute(CreateListingRequest(draft=draft))

    return ListingMapper.to_listing_response(listing)


@router.patch(
    "/parts/{part_id}",
    response_model=ListingResponseDTO,
    summary="Update a part",
    responses=error_responses(401, 403, 404, 422),
)
def update_part(
    part_id: str,
    payload: UpdateListingDTO,
    current_user: User = Depends(get_current_user),
    use_case: UpdateListing = Depends(get_update_listing_use_case),
) -> ListingResponseDTO:
    request = UpdateListingRequest(
        listing_id=part_id,
        actor_id=current_user.id,
        changes=ListingMapper.to_changes(payload),
    )

    listing = use_case.execute(request)

    return ListingMapper.to_listing_response(listing)


@router.delete(
    "/parts/{part_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove a part",
    description="Soft delete: the part is deactivated and disappears from search.",
    responses=error_responses(401, 403, 404),
)
def delete_part(
    part_id: str,
    current_user: User = Depends(get_current_user),
    use_case: DeleteListing = Depends(get_delete_listing_use_case),
) -> Response:
    use_case.execute(DeleteListingRequest(listing_id=part_id, actor_id=current_user.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
