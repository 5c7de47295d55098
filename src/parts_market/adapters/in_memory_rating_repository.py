from __future__ import annotations

import uuid
from datetime import datetime, timezone

from parts_market.domain.seller import Rating, RatingDraft
from parts_market.ports.rating_repository import RatingRepository


class InMemoryRatingRepository(RatingRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, ratings: list[Rating]) -> None:
        self._ratings = ratings

    def create(self, draft: RatingDraft) -> Rating:
        rating = Rating(
            id=str(uuid.uuid4()),
            seller_id=draft.seller_id,
            buyer_id=draft.buyer_id,
            rating=draft.rating,
            comment=draft.comment,
            created_at=datetime.now(timezone.utc),
        )
        self._ratings.append(rating)
        return rating

    def list_for_seller(self, seller_id: str) -> list[Rating]:
        ratings = [rating for rating in self._ratings if rating.seller_id == seller_id]
        ratings.sort(
            key=lambda rating: (rating.created_at is not None, rating.created_at or datetime.min),
            reverse=True,
        )
        return ratings
