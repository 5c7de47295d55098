from __future__ import annotations

from abc import ABC, abstractmethod

from parts_market.domain.seller import Rating, RatingDraft


class RatingRepository(ABC):
    """Port for seller ratings. Duplicate ratings per buyer are allowed."""

    @abstractmethod
    def create(self, draft: RatingDraft) -> Rating: ...

    @abstractmethod
    def list_for_seller(self, seller_id: str) -> list[Rating]:
        """Ratings received by the seller, newest first."""
        ...
