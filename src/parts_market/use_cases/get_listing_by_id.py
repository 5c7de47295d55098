"""Get listing by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from parts_market.domain.errors import NotFoundError
from parts_market.domain.listing import ListingWithSeller
from parts_market.ports.listing_repository import ListingRepository


@dataclass(frozen=True, slots=True)
class GetListingByIdRequest:
    listing_id: str


@dataclass(frozen=True, slots=True)
class GetListingByIdResponse:
    listing: ListingWithSeller


class GetListingById:
    """
    Use case for retrieving a single listing with its seller.

    Soft-deleted listings are still returned so existing links keep
    resolving; callers can check ``is_active``.
    """

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, request: GetListingByIdRequest) -> GetListingByIdResponse:
        """
        Raises:
            NotFoundError: If no listing has the given ID
        """
        listing = self._repository.get_by_id(request.listing_id)

        if listing is None:
            raise NotFoundError(resource="Part", identifier=request.listing_id)

        return GetListingByIdResponse(listing=listing)
