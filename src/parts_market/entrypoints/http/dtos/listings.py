from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from parts_market.domain.listing import MAX_IMAGES

PRICE_PATTERN = r"^\d+(\.\d{1,2})?$"


class SellerSummaryDTO(BaseModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    business_name: str | None = None
    seller_type: str | None = None
    location: str | None = None
    is_verified: bool = False


class ListingResponseDTO(BaseModel):
    id: str
    seller_id: str
    name: str
    description: str | None = None
    vehicle_type: str | None = None
    year: int | None = None
    make: str | None = None
    model: str | None = None
    car_model: str | None = None
    condition: str
    price: str | None = None
    images: list[str] = Field(default_factory=list)
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListingWithSellerResponseDTO(ListingResponseDTO):
    seller: SellerSummaryDTO


class ListingsSearchQueryDTO(BaseModel):
    """Query parameters for searching listings."""

    search: str | None = Field(
        default=None,
        description="Substring of the part name or car model (case-insensitive)",
        examples=["brake"],
    )
    car_model: str | None = Field(
        default=None,
        description="Substring of the car model (case-insensitive)",
        examples=["Corolla"],
    )
    condition: Literal["new", "used"] | None = Field(
        default=None,
        description="Exact condition",
        examples=["used"],
    )
    location: str | None = Field(
        default=None,
        description="Substring of the seller location (case-insensitive)",
        examples=["Nairobi"],
    )
    seller_type: Literal["private", "business"] | None = Field(
        default=None,
        description="Exact seller type",
        examples=["business"],
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["200.00"],
        pattern=PRICE_PATTERN,
    )


class ListingsSearchResponseDTO(BaseModel):
    parts: list[ListingWithSellerResponseDTO]
    total: int


class CreateListingDTO(BaseModel):
    """Payload for publishing a listing. Images are URLs of uploaded files."""

    name: str = Field(min_length=1, max_length=200, examples=["Front brake pads"])
    description: str | None = Field(default=None, examples=["Barely used, fits 2015-2020"])
    vehicle_type: str | None = Field(default=None, examples=["Cars & Trucks"])
    year: int | None = Field(default=None, ge=1900, examples=[2018])
    make: str | None = Field(default=None, examples=["Honda"])
    model: str | None = Field(default=None, examples=["Civic"])
    car_model: str | None = Field(default=None, examples=["Honda Civic 2016-2021"])
    condition: Literal["new", "used"] = Field(examples=["used"])
    price: str | None = Field(default=None, pattern=PRICE_PATTERN, examples=["45.00"])
    images: list[str] = Field(default_factory=list, max_length=MAX_IMAGES)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Front brake pads",
                "vehicle_type": "Cars & Trucks",
                "year": 2018,
                "make": "Honda",
                "model": "Civic",
                "car_model": "Honda Civic",
                "condition": "used",
                "price": "45.00",
                "images": ["/uploads/3f1c2a.jpg"],
            }
        }
    )


class UpdateListingDTO(BaseModel):
    """Partial update; only fields present in the payload are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    vehicle_type: str | None = None
    year: int | None = Field(default=None, ge=1900)
    make: str | None = None
    model: str | None = None
    car_model: str | None = None
    condition: Literal["new", "used"] | None = None
    price: str | None = Field(default=None, pattern=PRICE_PATTERN)
    images: list[str] | None = Field(default=None, max_length=MAX_IMAGES)
