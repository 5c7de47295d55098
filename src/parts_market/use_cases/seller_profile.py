from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from parts_market.domain.errors import NotFoundError
from parts_market.domain.listing import Listing
from parts_market.domain.seller import User, UserWithStats, validate_profile_changes
from parts_market.ports.listing_repository import ListingRepository
from parts_market.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class GetSellerProfile:
    """Seller (or any user) with stats computed at read time."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, seller_id: str) -> UserWithStats:
        """
        Raises:
            NotFoundError: If the user doesn't exist
        """
        seller = self._repository.get_with_stats(seller_id)

        if seller is None:
            raise NotFoundError(resource="Seller", identifier=seller_id)

        return seller


class ListSellerListings:
    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, seller_id: str) -> list[Listing]:
        return self._repository.list_by_seller(seller_id)


@dataclass(frozen=True, slots=True)
class UpdateProfileRequest:
    user_id: str
    changes: dict[str, Any] = field(default_factory=dict)


class UpdateProfile:
    """Users edit their own contact and seller fields; flags stay admin-only."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, request: UpdateProfileRequest) -> User:
        """
        Raises:
            ValidationError: If a field is read-only or seller_type is unknown
            NotFoundError: If the user doesn't exist
        """
        validate_profile_changes(request.changes)

        if self._repository.get_by_id(request.user_id) is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        user = self._repository.update_profile(request.user_id, dict(request.changes))

        logger.info(
            "Profile updated",
            extra={"user_id": user.id, "fields": sorted(request.changes)},
        )
        return user


@dataclass(frozen=True, slots=True)
class SyncIdentityRequest:
    """Identity claims forwarded by the auth proxy after sign-in."""

    user_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class SyncIdentity:
    """
    Create the caller's user record on first sign-in, refresh it afterwards.

    Only identity claims are overwritten; seller profile fields and the
    verification and admin flags are kept.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, request: SyncIdentityRequest) -> User:
        claims = {
            "email": request.email,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "profile_image_url": request.profile_image_url,
        }
        existing = self._repository.get_by_id(request.user_id)

        if existing is None:
            user = self._repository.upsert(User(id=request.user_id, **claims))
            logger.info("User registered", extra={"user_id": user.id})
            return user

        return self._repository.upsert(replace(existing, **claims))
