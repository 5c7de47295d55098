"""PostgreSQL implementation of ListingRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

from parts_market.domain.errors import InternalError
from parts_market.domain.listing import (
    Listing,
    ListingDraft,
    ListingFilters,
    ListingWithSeller,
    SellerSummary,
)
from parts_market.infra.db.models.part import PartRow
from parts_market.infra.db.models.user import UserRow
from parts_market.infra.db.session import integrity_errors_as_conflict
from parts_market.ports.listing_repository import ListingRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


def like_pattern(text: str) -> str:
    """Substring ILIKE pattern with LIKE wildcards in the input escaped."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresListingRepository(ListingRepository):
    """
    PostgreSQL implementation of ListingRepository.

    - Joins parts with their seller (INNER JOIN users)
    - Translates ListingFilters into SQL WHERE clauses
    - Orders by created_at DESC
    - Converts PartRow/UserRow (infrastructure) to domain entities
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, filters: ListingFilters) -> list[ListingWithSeller]:
        """
        Active listings matching the filters, newest first.

        Note:
            Assumes filters are validated by UseCase (contract programming).
        """
        query = self._build_query(filters).order_by(PartRow.created_at.desc())
        rows = self._session.execute(query).all()
        return [self._to_domain_with_seller(part, user) for part, user in rows]

    def get_by_id(self, listing_id: str) -> ListingWithSeller | None:
        try:
            part_id = UUID(listing_id)
        except ValueError:  # Invalid UUID format
            return None

        query = self._joined_query().where(PartRow.id == part_id)
        row = self._session.execute(query).one_or_none()
        if row is None:
            return None
        part, user = row
        return self._to_domain_with_seller(part, user)

    def list_by_seller(self, seller_id: str) -> list[Listing]:
        try:
            seller_uuid = UUID(seller_id)
        except ValueError:
            return []

        query = (
            select(PartRow)
            .where(PartRow.seller_id == seller_uuid, PartRow.is_active.is_(True))
            .order_by(PartRow.created_at.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def list_all(self) -> list[ListingWithSeller]:
        query = self._joined_query().order_by(PartRow.created_at.desc())
        rows = self._session.execute(query).all()
        return [self._to_domain_with_seller(part, user) for part, user in rows]

    def create(self, draft: ListingDraft) -> Listing:
        row = PartRow(
            seller_id=UUID(draft.seller_id),
            name=draft.name,
            description=draft.description,
            vehicle_type=draft.vehicle_type,
            year=draft.year,
            make=draft.make,
            model=draft.model,
            car_model=draft.car_model,
            condition=draft.condition,
            price=draft.price,
            images=list(draft.images),
            is_active=True,
        )
        self._session.add(row)
        with integrity_errors_as_conflict("Seller no longer exists", seller_id=draft.seller_id):
            self._session.flush()
        # Load server-side defaults (timestamps)
        self._session.refresh(row)
        return self._to_domain(row)

    def update(self, listing_id: str, changes: dict[str, Any]) -> Listing:
        row = self._session.get(PartRow, UUID(listing_id))
        if row is None:
            raise InternalError("Listing vanished before the update", listing_id=listing_id)

        for name, value in changes.items():
            setattr(row, name, list(value) if name == "images" else value)

        self._session.flush()
        self._session.refresh(row)
        return self._to_domain(row)

    def soft_delete(self, listing_id: str) -> None:
        self._session.execute(
            update(PartRow)
            .where(PartRow.id == UUID(listing_id))
            .values(is_active=False, updated_at=func.now())
        )

    def _joined_query(self) -> Select[tuple[PartRow, UserRow]]:
        return select(PartRow, UserRow).join(UserRow, PartRow.seller_id == UserRow.id)

    def _build_query(self, filters: ListingFilters) -> Select[tuple[PartRow, UserRow]]:
        """
        Build the joined query with the filter pipeline applied.

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = self._joined_query().where(PartRow.is_active.is_(True))

        # Substring match on name OR free-text car model
        if filters.search:
            pattern = like_pattern(filters.search)
            query = query.where(
                or_(
                    PartRow.name.ilike(pattern, escape="\\"),
                    PartRow.car_model.ilike(pattern, escape="\\"),
                )
            )

        if filters.car_model:
            query = query.where(
                PartRow.car_model.ilike(like_pattern(filters.car_model), escape="\\")
            )

        if filters.condition:
            query = query.where(PartRow.condition == filters.condition)

        if filters.location:
            query = query.where(
                UserRow.location.ilike(like_pattern(filters.location), escape="\\")
            )

        if filters.seller_type:
            query = query.where(UserRow.seller_type == filters.seller_type)

        # NULL prices never satisfy the comparison
        if filters.max_price is not None:
            query = query.where(PartRow.price.is_not(None), PartRow.price <= filters.max_price)

        return query

    def _to_domain(self, row: PartRow) -> Listing:
        """
        Convert database model (PartRow) to domain entity (Listing).

        Args:
            row: SQLAlchemy PartRow model

        Returns:
            Listing domain entity
        """
        return Listing(
            id=str(row.id),  # Convert UUID to string
            seller_id=str(row.seller_id),
            name=row.name,
            condition=row.condition,
            description=row.description,
            vehicle_type=row.vehicle_type,
            year=row.year,
            make=row.make,
            model=row.model,
            car_model=row.car_model,
            price=row.price,  # Already Decimal from NUMERIC column
            images=tuple(row.images or ()),
            is_active=bool(row.is_active),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_domain_with_seller(self, part: PartRow, user: UserRow) -> ListingWithSeller:
        return ListingWithSeller(
            listing=self._to_domain(part),
            seller=SellerSummary(
                id=str(user.id),
                first_name=user.first_name,
                last_name=user.last_name,
                business_name=user.business_name,
                seller_type=user.seller_type,
                location=user.location,
                is_verified=bool(user.is_verified),
            ),
        )
