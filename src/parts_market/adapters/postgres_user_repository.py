"""PostgreSQL implementation of UserRepository."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.orm import Session

from parts_market.domain.errors import InternalError
from parts_market.domain.seller import SellerStats, User, UserWithStats
from parts_market.infra.db.models.part import PartRow
from parts_market.infra.db.models.rating import RatingRow
from parts_market.infra.db.models.user import UserRow
from parts_market.infra.db.session import integrity_errors_as_conflict
from parts_market.ports.user_repository import UserRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

_UPSERT_FIELDS = (
    "email",
    "first_name",
    "last_name",
    "profile_image_url",
    "business_name",
    "seller_type",
    "location",
    "phone_number",
    "whatsapp_number",
    "is_verified",
    "is_admin",
)


class PostgresUserRepository(UserRepository):
    """
    PostgreSQL implementation of UserRepository.

    Stats come from correlated scalar subqueries so listings and ratings
    never multiply each other the way a double LEFT JOIN would.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str) -> User | None:
        row = self._get_row(user_id)
        return self._to_domain(row) if row else None

    def upsert(self, user: User) -> User:
        values = {name: getattr(user, name) for name in _UPSERT_FIELDS}
        statement = (
            insert(UserRow)
            .values(id=UUID(user.id), **values)
            .on_conflict_do_update(
                index_elements=[UserRow.id],
                set_={**values, "updated_at": func.now()},
            )
            .returning(UserRow)
        )
        with integrity_errors_as_conflict("Email already registered", user_id=user.id):
            row = self._session.scalars(
                statement, execution_options={"populate_existing": True}
            ).one()
        return self._to_domain(row)

    def get_with_stats(self, user_id: str) -> UserWithStats | None:
        try:
            user_uuid = UUID(user_id)
        except ValueError:  # Invalid UUID format
            return None

        query = self._stats_query().where(UserRow.id == user_uuid)
        row = self._session.execute(query).one_or_none()
        return self._to_domain_with_stats(*row) if row else None

    def list_sellers_with_stats(self) -> list[UserWithStats]:
        query = (
            self._stats_query()
            .where(UserRow.seller_type.is_not(None))
            .order_by(UserRow.created_at.desc())
        )
        rows = self._session.execute(query).all()
        return [self._to_domain_with_stats(*row) for row in rows]

    def update_profile(self, user_id: str, changes: dict[str, Any]) -> User:
        row = self._require_row(user_id)
        for name, value in changes.items():
            setattr(row, name, value)
        with integrity_errors_as_conflict("Profile conflicts with another user", user_id=user_id):
            self._session.flush()
        self._session.refresh(row)
        return self._to_domain(row)

    def set_verification(self, user_id: str, is_verified: bool) -> User:
        return self.update_profile(user_id, {"is_verified": is_verified})

    def delete(self, user_id: str) -> None:
        # parts and ratings go with the user via ON DELETE CASCADE
        self._session.execute(delete(UserRow).where(UserRow.id == UUID(user_id)))

    def _get_row(self, user_id: str) -> UserRow | None:
        try:
            return self._session.get(UserRow, UUID(user_id))
        except ValueError:  # Invalid UUID format
            return None

    def _require_row(self, user_id: str) -> UserRow:
        row = self._get_row(user_id)
        if row is None:
            raise InternalError("User vanished before the update", user_id=user_id)
        return row

    def _stats_query(self) -> Select[tuple[UserRow, int, Decimal | None, int]]:
        total_listings = (
            select(func.count(PartRow.id))
            .where(PartRow.seller_id == UserRow.id, PartRow.is_active.is_(True))
            .correlate(UserRow)
            .scalar_subquery()
        )
        average_rating = (
            select(func.avg(RatingRow.rating))
            .where(RatingRow.seller_id == UserRow.id)
            .correlate(UserRow)
            .scalar_subquery()
        )
        total_ratings = (
            select(func.count(RatingRow.id))
            .where(RatingRow.seller_id == UserRow.id)
            .correlate(UserRow)
            .scalar_subquery()
        )
        return select(
            UserRow,
            total_listings.label("total_listings"),
            average_rating.label("average_rating"),
            total_ratings.label("total_ratings"),
        )

    def _to_domain(self, row: UserRow) -> User:
        return User(
            id=str(row.id),
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            profile_image_url=row.profile_image_url,
            business_name=row.business_name,
            seller_type=row.seller_type,
            location=row.location,
            phone_number=row.phone_number,
            whatsapp_number=row.whatsapp_number,
            is_verified=bool(row.is_verified),
            is_admin=bool(row.is_admin),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_domain_with_stats(
        self,
        row: UserRow,
        total_listings: int | None,
        average_rating: Decimal | None,
        total_ratings: int | None,
    ) -> UserWithStats:
        average = Decimal(average_rating or 0).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return UserWithStats(
            user=self._to_domain(row),
            stats=SellerStats(
                total_listings=total_listings or 0,
                average_rating=average,
                total_ratings=total_ratings or 0,
            ),
        )
