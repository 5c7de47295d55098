from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from parts_market.domain.seller import User, UserWithStats


class UserRepository(ABC):
    """
    Port for user and seller data access.

    Seller stats are computed on every read, never cached.
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def upsert(self, user: User) -> User:
        """Insert the user or overwrite the stored one with the same id."""
        ...

    @abstractmethod
    def get_with_stats(self, user_id: str) -> UserWithStats | None: ...

    @abstractmethod
    def list_sellers_with_stats(self) -> list[UserWithStats]:
        """Users with a seller type, newest account first."""
        ...

    @abstractmethod
    def update_profile(self, user_id: str, changes: dict[str, Any]) -> User: ...

    @abstractmethod
    def set_verification(self, user_id: str, is_verified: bool) -> User: ...

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove the user with their listings and ratings."""
        ...
