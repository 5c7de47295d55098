from __future__ import annotations

from decimal import Decimal
from typing import Any

from parts_market.domain.listing import (
    Listing,
    ListingDraft,
    ListingFilters,
    ListingWithSeller,
)
from parts_market.entrypoints.http.dtos.listings import (
    CreateListingDTO,
    ListingResponseDTO,
    ListingsSearchQueryDTO,
    ListingsSearchResponseDTO,
    ListingWithSellerResponseDTO,
    SellerSummaryDTO,
    UpdateListingDTO,
)
from parts_market.use_cases.search_listings import (
    SearchListingsRequest,
    SearchListingsResponse,
)


class ListingMapper:
    """Maps between REST DTOs and domain models for listings."""

    @staticmethod
    def to_domain_filters(dto: ListingsSearchQueryDTO) -> ListingFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Empty strings are treated like absent parameters.
        """
        return ListingFilters(
            search=dto.search or None,
            car_model=dto.car_model or None,
            condition=dto.condition,
            location=dto.location or None,
            seller_type=dto.seller_type,
            max_price=Decimal(dto.max_price) if dto.max_price else None,
        )

    @staticmethod
    def to_search_request(dto: ListingsSearchQueryDTO) -> SearchListingsRequest:
        return SearchListingsRequest(filters=ListingMapper.to_domain_filters(dto))

    @staticmethod
    def to_draft(dto: CreateListingDTO, seller_id: str) -> ListingDraft:
        return ListingDraft(
            seller_id=seller_id,
            name=dto.name,
            condition=dto.condition,
            description=dto.description,
            vehicle_type=dto.vehicle_type,
            year=dto.year,
            make=dto.make,
            model=dto.model,
            car_model=dto.car_model,
            price=Decimal(dto.price) if dto.price else None,
            images=tuple(dto.images),
        )

    @staticmethod
    def to_changes(dto: UpdateListingDTO) -> dict[str, Any]:
        """Only fields sent by the client; price string → Decimal."""
        changes = dto.model_dump(exclude_unset=True)
        if changes.get("price") is not None:
            changes["price"] = Decimal(changes["price"])
        return changes

    @staticmethod
    def to_listing_response(listing: Listing) -> ListingResponseDTO:
        """Handles Decimal → str conversion at the boundary."""
        return ListingResponseDTO(**ListingMapper._listing_fields(listing))

    @staticmethod
    def to_listing_with_seller_response(item: ListingWithSeller) -> ListingWithSellerResponseDTO:
        seller = item.seller
        return ListingWithSellerResponseDTO(
            **ListingMapper._listing_fields(item.listing),
            seller=SellerSummaryDTO(
                id=seller.id,
                first_name=seller.first_name,
                last_name=seller.last_name,
                business_name=seller.business_name,
                seller_type=seller.seller_type,
                location=seller.location,
                is_verified=seller.is_verified,
            ),
        )

    @staticmethod
    def to_search_response(result: SearchListingsResponse) -> ListingsSearchResponseDTO:
        return ListingsSearchResponseDTO(
            parts=[ListingMapper.to_listing_with_seller_response(item) for item in result.listings],
            total=len(result.listings),
        )

    @staticmethod
    def _listing_fields(listing: Listing) -> dict[str, Any]:
        return {
            "id": listing.id,
            "seller_id": listing.seller_id,
            "name": listing.name,
            "description": listing.description,
            "vehicle_type": listing.vehicle_type,
            "year": listing.year,
            "make": listing.make,
            "model": listing.model,
            "car_model": listing.car_model,
            "condition": listing.condition,
            "price": str(listing.price) if listing.price is not None else None,
            "images": list(listing.images),
            "is_active": listing.is_active,
            "created_at": listing.created_at,
            "updated_at": listing.updated_at,
        }
