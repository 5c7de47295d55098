from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from parts_market.domain.listing import Listing, ListingDraft, ListingFilters, ListingWithSeller


class ListingRepository(ABC):
    """
    Port for listing (part) data access.

    Contract (Preconditions):
        - filters, drafts and changes must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Ordering: every list operation returns the most recently created first.
    """

    @abstractmethod
    def search(self, filters: ListingFilters) -> list[ListingWithSeller]:
        """
        Active listings matching the filter pipeline (AND semantics).

        Args:
            filters: Filter criteria - pre-validated

        Returns:
            Matching listings joined with their seller, newest first
        """
        ...

    @abstractmethod
    def get_by_id(self, listing_id: str) -> ListingWithSeller | None:
        """Listing by id, active or not; None if missing."""
        ...

    @abstractmethod
    def list_by_seller(self, seller_id: str) -> list[Listing]:
        """Active listings of one seller."""
        ...

    @abstractmethod
    def list_all(self) -> list[ListingWithSeller]:
        """Every listing including soft-deleted ones (moderation view)."""
        ...

    @abstractmethod
    def create(self, draft: ListingDraft) -> Listing: ...

    @abstractmethod
    def update(self, listing_id: str, changes: dict[str, Any]) -> Listing:
        """Apply field changes and bump updated_at."""
        ...

    @abstractmethod
    def soft_delete(self, listing_id: str) -> None:
        """Clear the active flag; the row is kept."""
        ...
