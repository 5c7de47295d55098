from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from parts_market.domain.errors import InternalError
from parts_market.domain.listing import Listing
from parts_market.domain.seller import Rating, User, UserWithStats, compute_seller_stats
from parts_market.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Canonical contract implementation for tests.

    Shares its listing and rating lists with the other in-memory repositories
    so stats reflect their writes.
    """

    def __init__(
        self,
        users: list[User],
        listings: list[Listing] | None = None,
        ratings: list[Rating] | None = None,
    ) -> None:
        self._users = users
        self._listings = listings if listings is not None else []
        self._ratings = ratings if ratings is not None else []

    def get_by_id(self, user_id: str) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def upsert(self, user: User) -> User:
        now = datetime.now(timezone.utc)
        for index, existing in enumerate(self._users):
            if existing.id == user.id:
                stored = replace(user, created_at=existing.created_at, updated_at=now)
                self._users[index] = stored
                return stored

        stored = replace(user, created_at=user.created_at or now, updated_at=now)
        self._users.append(stored)
        return stored

    def get_with_stats(self, user_id: str) -> UserWithStats | None:
        user = self.get_by_id(user_id)
        if user is None:
            return None
        return self._with_stats(user)

    def list_sellers_with_stats(self) -> list[UserWithStats]:
        sellers = [user for user in self._users if user.is_seller]
        sellers.sort(
            key=lambda user: (user.created_at is not None, user.created_at or datetime.min),
            reverse=True,
        )
        return [self._with_stats(user) for user in sellers]

    def update_profile(self, user_id: str, changes: dict[str, Any]) -> User:
        return self._replace(user_id, **changes)

    def set_verification(self, user_id: str, is_verified: bool) -> User:
        return self._replace(user_id, is_verified=is_verified)

    def delete(self, user_id: str) -> None:
        self._users[:] = [user for user in self._users if user.id != user_id]
        self._listings[:] = [
            listing for listing in self._listings if listing.seller_id != user_id
        ]
        self._ratings[:] = [
            rating
            for rating in self._ratings
            if rating.seller_id != user_id and rating.buyer_id != user_id
        ]

    def _with_stats(self, user: User) -> UserWithStats:
        stats = compute_seller_stats(
            listings=(listing for listing in self._listings if listing.seller_id == user.id),
            ratings=(rating for rating in self._ratings if rating.seller_id == user.id),
        )
        return UserWithStats(user=user, stats=stats)

    def _replace(self, user_id: str, **changes: Any) -> User:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                updated = replace(user, **changes, updated_at=datetime.now(timezone.utc))
                self._users[index] = updated
                return updated
        raise InternalError("User vanished before the update", user_id=user_id)
