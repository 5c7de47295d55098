from datetime import datetime

from pydantic import BaseModel, Field


class CreateRatingDTO(BaseModel):
    seller_id: str
    rating: int = Field(ge=1, le=5, description="Stars, 1 to 5", examples=[5])
    comment: str | None = Field(default=None, examples=["Fast reply, part as described"])


class RatingResponseDTO(BaseModel):
    id: str
    seller_id: str
    buyer_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None
