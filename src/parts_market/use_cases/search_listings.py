from __future__ import annotations

from dataclasses import dataclass

from parts_market.domain.listing import ListingFilters, ListingWithSeller
from parts_market.ports.listing_repository import ListingRepository


@dataclass(frozen=True, slots=True)
class SearchListingsRequest:
    filters: ListingFilters


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    listings: list[ListingWithSeller]


class SearchListings:
    """
    Search active listings.

    Validates the filters and delegates the filter pipeline to the
    repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, request: SearchListingsRequest) -> SearchListingsResponse:
        """
        Execute listing search.

        Args:
            request: Filter criteria

        Returns:
            Matching listings, newest first

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Validate inputs (UseCase responsibility per contract)
        request.filters.validate()

        listings = self._repository.search(filters=request.filters)

        return SearchListingsResponse(listings=listings)
