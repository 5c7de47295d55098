"""
Dependency injection for FastAPI routes.

Database sessions, repositories and use cases are built per request.
Only stateless singletons (the vehicle taxonomy) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from parts_market.adapters.postgres_listing_repository import PostgresListingRepository
from parts_market.adapters.postgres_rating_repository import PostgresRatingRepository
from parts_market.adapters.postgres_user_repository import PostgresUserRepository
from parts_market.domain.errors import UnauthorizedError
from parts_market.domain.seller import User
from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy
from parts_market.infra.clock import current_year
from parts_market.infra.db.session import get_session
from parts_market.ports.listing_repository import ListingRepository
from parts_market.ports.rating_repository import RatingRepository
from parts_market.ports.user_repository import UserRepository
from parts_market.use_cases.get_listing_by_id import GetListingById
from parts_market.use_cases.manage_listing import CreateListing, DeleteListing, UpdateListing
from parts_market.use_cases.moderate_marketplace import (
    ListAllListings,
    ListSellers,
    RemoveSeller,
    SetSellerVerification,
)
from parts_market.use_cases.rate_seller import ListSellerRatings, RateSeller
from parts_market.use_cases.search_listings import SearchListings
from parts_market.use_cases.seller_profile import (
    GetSellerProfile,
    ListSellerListings,
    SyncIdentity,
    UpdateProfile,
)
from parts_market.use_cases.vehicle_options import GetVehicleOptions, ValidateVehicleSelection


# ==============================================================================
# Infrastructure
# ==============================================================================


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    get_session() commits on success, rolls back on exception and closes
    the session when the request ends.
    """
    with get_session() as session:
        yield session


@lru_cache(maxsize=1)
def get_vehicle_taxonomy() -> VehicleTaxonomy:
    return VehicleTaxonomy()


def get_current_year() -> int:
    return current_year()


def get_listing_repository(db: Session = Depends(get_db)) -> ListingRepository:
    return PostgresListingRepository(session=db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return PostgresUserRepository(session=db)


def get_rating_repository(db: Session = Depends(get_db)) -> RatingRepository:
    return PostgresRatingRepository(session=db)


# ==============================================================================
# Authentication
# ==============================================================================


def get_current_user(
    x_user_id: str | None = Header(default=None),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    The authenticated caller.

    The upstream auth proxy sets X-User-Id after login; a missing header or
    an id without a user record is rejected.

    Raises:
        UnauthorizedError: If the caller cannot be identified
    """
    if not x_user_id:
        raise UnauthorizedError("Authentication required")

    user = users.get_by_id(x_user_id)
    if user is None:
        raise UnauthorizedError("Unknown user")

    return user


# ==============================================================================
# Use Cases
# ==============================================================================


def get_search_listings_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
) -> SearchListings:
    return SearchListings(listing_repository=listings)


def get_get_listing_by_id_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
) -> GetListingById:
    return GetListingById(listing_repository=listings)


def get_create_listing_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
    taxonomy: VehicleTaxonomy = Depends(get_vehicle_taxonomy),
    year: int = Depends(get_current_year),
) -> CreateListing:
    return CreateListing(listing_repository=listings, taxonomy=taxonomy, current_year=year)


def get_update_listing_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
    taxonomy: VehicleTaxonomy = Depends(get_vehicle_taxonomy),
    year: int = Depends(get_current_year),
) -> UpdateListing:
    return UpdateListing(listing_repository=listings, taxonomy=taxonomy, current_year=year)


def get_delete_listing_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
) -> DeleteListing:
    return DeleteListing(listing_repository=listings)


def get_seller_profile_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> GetSellerProfile:
    return GetSellerProfile(user_repository=users)


def get_seller_listings_use_case(
    listings: ListingRepository = Depends(get_listing_repository),
) -> ListSellerListings:
    return ListSellerListings(listing_repository=listings)


def get_update_profile_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> UpdateProfile:
    return UpdateProfile(user_repository=users)


def get_sync_identity_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> SyncIdentity:
    return SyncIdentity(user_repository=users)


def get_rate_seller_use_case(
    users: UserRepository = Depends(get_user_repository),
    ratings: RatingRepository = Depends(get_rating_repository),
) -> RateSeller:
    return RateSeller(user_repository=users, rating_repository=ratings)


def get_seller_ratings_use_case(
    ratings: RatingRepository = Depends(get_rating_repository),
) -> ListSellerRatings:
    return ListSellerRatings(rating_repository=ratings)


def get_list_sellers_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> ListSellers:
    return ListSellers(user_repository=users)


def get_set_seller_verification_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> SetSellerVerification:
    return SetSellerVerification(user_repository=users)


def get_remove_seller_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> RemoveSeller:
    return RemoveSeller(user_repository=users)


def get_list_all_listings_use_case(
    users: UserRepository = Depends(get_user_repository),
    listings: ListingRepository = Depends(get_listing_repository),
) -> ListAllListings:
    return ListAllListings(user_repository=users, listing_repository=listings)


def get_vehicle_options_use_case(
    taxonomy: VehicleTaxonomy = Depends(get_vehicle_taxonomy),
    year: int = Depends(get_current_year),
) -> GetVehicleOptions:
    return GetVehicleOptions(taxonomy=taxonomy, current_year=year)


def get_validate_vehicle_use_case(
    taxonomy: VehicleTaxonomy = Depends(get_vehicle_taxonomy),
    year: int = Depends(get_current_year),
) -> ValidateVehicleSelection:
    return ValidateVehicleSelection(taxonomy=taxonomy, current_year=year)
