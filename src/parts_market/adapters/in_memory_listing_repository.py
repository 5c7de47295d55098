from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from parts_market.domain.errors import InternalError
from parts_market.domain.listing import (
    Listing,
    ListingDraft,
    ListingFilters,
    ListingWithSeller,
    SellerSummary,
    build_listing_predicate,
    sort_by_recency,
)
from parts_market.domain.seller import User
from parts_market.ports.listing_repository import ListingRepository


def seller_summary(user: User) -> SellerSummary:
    return SellerSummary(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        business_name=user.business_name,
        seller_type=user.seller_type,
        location=user.location,
        is_verified=user.is_verified,
    )


class InMemoryListingRepository(ListingRepository):
    """
    Canonical contract implementation for tests.

    - Listings and users are shared lists (mutated in place)
    - Joins each listing with its seller; listings of unknown sellers are skipped
    - Applies the domain filter predicate, then recency ordering
    """

    def __init__(self, listings: list[Listing], users: list[User]) -> None:
        self._listings = listings
        self._users = users

    def search(self, filters: ListingFilters) -> list[ListingWithSeller]:
        # Trust that UseCase has validated inputs (contract programming)
        predicate = build_listing_predicate(filters)
        return sort_by_recency(item for item in self._joined() if predicate(item))

    def get_by_id(self, listing_id: str) -> ListingWithSeller | None:
        return next((item for item in self._joined() if item.listing.id == listing_id), None)

    def list_by_seller(self, seller_id: str) -> list[Listing]:
        items = sort_by_recency(
            item
            for item in self._joined()
            if item.listing.seller_id == seller_id and item.listing.is_active
        )
        return [item.listing for item in items]

    def list_all(self) -> list[ListingWithSeller]:
        return sort_by_recency(self._joined())

    def create(self, draft: ListingDraft) -> Listing:
        now = datetime.now(timezone.utc)
        listing = Listing(
            id=str(uuid.uuid4()),
            seller_id=draft.seller_id,
            name=draft.name,
            condition=draft.condition,
            description=draft.description,
            vehicle_type=draft.vehicle_type,
            year=draft.year,
            make=draft.make,
            model=draft.model,
            car_model=draft.car_model,
            price=draft.price,
            images=tuple(draft.images),
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        self._listings.append(listing)
        return listing

    def update(self, listing_id: str, changes: dict[str, Any]) -> Listing:
        index = self._index_of(listing_id)
        if "images" in changes:
            changes = {**changes, "images": tuple(changes["images"])}
        updated = replace(
            self._listings[index], **changes, updated_at=datetime.now(timezone.utc)
        )
        self._listings[index] = updated
        return updated

    def soft_delete(self, listing_id: str) -> None:
        index = self._index_of(listing_id)
        self._listings[index] = replace(self._listings[index], is_active=False)

    def _index_of(self, listing_id: str) -> int:
        for index, listing in enumerate(self._listings):
            if listing.id == listing_id:
                return index
        raise InternalError("Listing vanished before the update", listing_id=listing_id)

    def _joined(self) -> list[ListingWithSeller]:
        users = {user.id: user for user in self._users}
        return [
            ListingWithSeller(listing=listing, seller=seller_summary(users[listing.seller_id]))
            for listing in self._listings
            if listing.seller_id in users
        ]
