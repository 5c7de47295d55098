"""PostgreSQL implementation of RatingRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from parts_market.domain.seller import Rating, RatingDraft
from parts_market.infra.db.models.rating import RatingRow
from parts_market.infra.db.session import integrity_errors_as_conflict
from parts_market.ports.rating_repository import RatingRepository


class PostgresRatingRepository(RatingRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, draft: RatingDraft) -> Rating:
        row = RatingRow(
            seller_id=UUID(draft.seller_id),
            buyer_id=UUID(draft.buyer_id),
            rating=draft.rating,
            comment=draft.comment,
        )
        self._session.add(row)
        with integrity_errors_as_conflict(
            "Seller or buyer no longer exists",
            seller_id=draft.seller_id,
            buyer_id=draft.buyer_id,
        ):
            self._session.flush()
        self._session.refresh(row)
        return self._to_domain(row)

    def list_for_seller(self, seller_id: str) -> list[Rating]:
        try:
            seller_uuid = UUID(seller_id)
        except ValueError:  # Invalid UUID format
            return []

        query = (
            select(RatingRow)
            .where(RatingRow.seller_id == seller_uuid)
            .order_by(RatingRow.created_at.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: RatingRow) -> Rating:
        return Rating(
            id=str(row.id),
            seller_id=str(row.seller_id),
            buyer_id=str(row.buyer_id),
            rating=row.rating,
            comment=row.comment,
            created_at=row.created_at,
        )
