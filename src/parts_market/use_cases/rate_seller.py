from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_market.domain.errors import NotFoundError
from parts_market.domain.seller import Rating, RatingDraft
from parts_market.ports.rating_repository import RatingRepository
from parts_market.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RateSellerRequest:
    draft: RatingDraft


class RateSeller:
    """
    Record a buyer's rating of a seller.

    A buyer may rate the same seller more than once; every rating counts
    towards the seller's average.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        rating_repository: RatingRepository,
    ) -> None:
        self._users = user_repository
        self._ratings = rating_repository

    def execute(self, request: RateSellerRequest) -> Rating:
        """
        Raises:
            ValidationError: If the rating is outside 1..5
            NotFoundError: If the seller doesn't exist
        """
        draft = request.draft
        draft.validate()

        if self._users.get_by_id(draft.seller_id) is None:
            raise NotFoundError(resource="Seller", identifier=draft.seller_id)

        rating = self._ratings.create(draft)

        logger.info(
            "Rating created",
            extra={"seller_id": rating.seller_id, "rating": rating.rating},
        )
        return rating


class ListSellerRatings:
    def __init__(self, rating_repository: RatingRepository) -> None:
        self._ratings = rating_repository

    def execute(self, seller_id: str) -> list[Rating]:
        return self._ratings.list_for_seller(seller_id)
