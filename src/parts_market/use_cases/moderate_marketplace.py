"""Admin-only moderation of sellers and listings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_market.domain.errors import ForbiddenError, NotFoundError
from parts_market.domain.listing import ListingWithSeller
from parts_market.domain.seller import User, UserWithStats
from parts_market.ports.listing_repository import ListingRepository
from parts_market.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


def require_admin(user_repository: UserRepository, actor_id: str) -> User:
    """
    Raises:
        ForbiddenError: If the actor is unknown or not an admin
    """
    actor = user_repository.get_by_id(actor_id)

    if actor is None or not actor.is_admin:
        raise ForbiddenError("Admin access required")

    return actor


class ListSellers:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, actor_id: str) -> list[UserWithStats]:
        require_admin(self._users, actor_id)
        return self._users.list_sellers_with_stats()


@dataclass(frozen=True, slots=True)
class SetSellerVerificationRequest:
    actor_id: str
    seller_id: str
    is_verified: bool


class SetSellerVerification:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, request: SetSellerVerificationRequest) -> User:
        """
        Raises:
            ForbiddenError: If the actor is not an admin
            NotFoundError: If the seller doesn't exist
        """
        require_admin(self._users, request.actor_id)

        if self._users.get_by_id(request.seller_id) is None:
            raise NotFoundError(resource="Seller", identifier=request.seller_id)

        seller = self._users.set_verification(request.seller_id, request.is_verified)

        logger.info(
            "Seller verification changed",
            extra={
                "seller_id": seller.id,
                "is_verified": seller.is_verified,
                "admin_id": request.actor_id,
            },
        )
        return seller


class RemoveSeller:
    """Delete a seller account together with its listings and ratings."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, actor_id: str, seller_id: str) -> None:
        require_admin(self._users, actor_id)

        if self._users.get_by_id(seller_id) is None:
            raise NotFoundError(resource="Seller", identifier=seller_id)

        self._users.delete(seller_id)

        logger.info("Seller removed", extra={"seller_id": seller_id, "admin_id": actor_id})


class ListAllListings:
    """Every listing, soft-deleted ones included."""

    def __init__(
        self,
        user_repository: UserRepository,
        listing_repository: ListingRepository,
    ) -> None:
        self._users = user_repository
        self._listings = listing_repository

    def execute(self, actor_id: str) -> list[ListingWithSeller]:
        require_admin(self._users, actor_id)
        return self._listings.list_all()
